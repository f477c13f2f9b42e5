# Core config
API_V1_STR: str = "/api/v1"
PROJECT_NAME: str = "sysinfo-core"
PROJECT_DESCRIPTION: str = (
    "The sysinfo-core API serves CPU, process and disk usage from captured reports."
)

DEFAULT_PORT: int = 8083

# Captured report file names, relative to the data directory
CPU_INFO_FILE: str = "lscpu_out.txt"
TOP_FILE: str = "top.txt"
DISK_INFO_FILE: str = "df_output.txt"

# Number of processes kept in a snapshot
PROCESS_LIMIT: int = 10

# Report sources, used to name the failing input in errors
CPU_SOURCE: str = "cpu"
TOP_SOURCE: str = "top"
DISK_SOURCE: str = "disk"

SOURCE_DESCRIPTIONS = {
    CPU_SOURCE: "CPU info",
    TOP_SOURCE: "top output",
    DISK_SOURCE: "disk info",
}
