import sys

BLUE = "\033[1;34m"
RED = "\033[1;31m"
RESET = "\033[0m"


def echo_status(msg: str) -> None:
    print(f"{BLUE}>>> {msg}{RESET}", file=sys.stderr)


def echo_error(msg: str) -> None:
    print(f"{RED}ERROR: {msg}{RESET}", file=sys.stderr)
    sys.exit(1)
