class OutputWriteError(Exception):
    """Raised when a rendered snapshot cannot be written out"""

    def __init__(self, path: str, error_msg: str):
        super().__init__(error_msg)

        self.path = path
        self.error_msg = error_msg

    def __str__(self):
        return f"Error writing {self.path}: {self.error_msg}"
