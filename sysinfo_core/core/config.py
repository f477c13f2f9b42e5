from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

from sysinfo_core import constants


class Settings(BaseSettings):
    API_V1_STR: str = constants.API_V1_STR

    PROJECT_NAME: str = constants.PROJECT_NAME

    PROJECT_DESCRIPTION: str = constants.PROJECT_DESCRIPTION

    TAGS_METADATA: list = [
        {
            "name": "system",
            "description": "CPU, process and disk usage snapshot",
        },
    ]

    # directory holding the captured reports
    DATA_DIR: Path = Path(".")

    CPU_INFO_FILE: str = constants.CPU_INFO_FILE

    TOP_FILE: str = constants.TOP_FILE

    DISK_INFO_FILE: str = constants.DISK_INFO_FILE

    PROCESS_LIMIT: int = constants.PROCESS_LIMIT

    # JSON log files are only written when this is set
    LOG_DIR: Optional[Path] = None

    class Config:
        case_sensitive = True
        env_prefix = "SYSINFO_"

    def cpu_info_path(self) -> Path:
        return self.DATA_DIR / self.CPU_INFO_FILE

    def top_path(self) -> Path:
        return self.DATA_DIR / self.TOP_FILE

    def disk_info_path(self) -> Path:
        return self.DATA_DIR / self.DISK_INFO_FILE


settings = Settings()

# when app is created, endpoints will be stored here for api landing page
endpoints = []
