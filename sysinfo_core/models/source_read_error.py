from sysinfo_core.constants import SOURCE_DESCRIPTIONS


class SourceReadError(Exception):
    """Raised when a captured report cannot be opened or read"""

    def __init__(self, source: str, path: str, error_msg: str):
        super().__init__(error_msg)

        self.source = source
        self.path = path
        self.error_msg = error_msg

    @property
    def description(self) -> str:
        return SOURCE_DESCRIPTIONS.get(self.source, self.source)

    def __str__(self):
        return f"Error reading {self.description}: {self.error_msg}"
