#!/usr/bin/env python3

import argparse
import sys

from sysinfo_core.cli.cli_utils import echo_error, echo_status
from sysinfo_core.core.config import settings
from sysinfo_core.models.output_write_error import OutputWriteError
from sysinfo_core.models.source_read_error import SourceReadError
from sysinfo_core.services import system_info_service


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a system info snapshot from captured lscpu, top and df output"
    )
    parser.add_argument(
        "--cpu-file",
        default=str(settings.cpu_info_path()),
        help="captured lscpu output (default: %(default)s)",
    )
    parser.add_argument(
        "--top-file",
        default=str(settings.top_path()),
        help="captured top -b output (default: %(default)s)",
    )
    parser.add_argument(
        "--disk-file",
        default=str(settings.disk_info_path()),
        help="captured df -h output (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="write the JSON snapshot to this file instead of stdout",
    )
    return parser


def main(argv=None) -> int:
    args = setup_parser().parse_args(argv)

    try:
        snapshot = system_info_service.get_system_info(
            args.cpu_file,
            args.top_file,
            args.disk_file,
            process_limit=settings.PROCESS_LIMIT,
        )
    except SourceReadError as e:
        echo_error(str(e))

    content = system_info_service.render_system_info(snapshot)

    if not args.output:
        print(content)
        return 0

    try:
        system_info_service.write_to_json_file(args.output, content)
    except OutputWriteError as e:
        echo_error(str(e))

    echo_status(f"Snapshot written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
