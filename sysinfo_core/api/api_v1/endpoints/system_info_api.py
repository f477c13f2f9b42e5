from fastapi import APIRouter

from sysinfo_core.core.config import settings
from sysinfo_core.core.logging import get_logger
from sysinfo_core.core.responses import PrettyJSONResponse
from sysinfo_core.schemas import system_info
from sysinfo_core.services import system_info_service

router = APIRouter()

log = get_logger(__name__)


@router.get(
    "/info",
    response_model=system_info.SystemInfo,
    response_class=PrettyJSONResponse,
)
def show_system_info():
    """
    Returns a snapshot of CPU topology, top processes and disk usage.

    Sources (captured reports under the configured data directory):
     - 'lscpu' output for the CPU description.
     - 'top -b' output for the 10 processes with the highest %CPU.
     - 'df -h' output for the mounted filesystems.

    A report that cannot be read fails the whole request with a 500 naming it.
    """
    snapshot = system_info_service.get_system_info(
        settings.cpu_info_path(),
        settings.top_path(),
        settings.disk_info_path(),
        process_limit=settings.PROCESS_LIMIT,
    )

    return PrettyJSONResponse(content=snapshot.model_dump(by_alias=True))
