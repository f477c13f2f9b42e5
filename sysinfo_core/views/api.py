# third party imports
import fastapi

# app imports
from sysinfo_core.__version__ import __version__
from sysinfo_core.api.api_v1.endpoints.system_info_api import show_system_info
from sysinfo_core.core.config import endpoints, settings
from sysinfo_core.core.responses import PrettyJSONResponse

router = fastapi.APIRouter()


@router.get("/", include_in_schema=False)
async def index():
    return PrettyJSONResponse(
        content={
            "name": settings.PROJECT_NAME,
            "version": __version__,
            "docs": "/docs",
            "endpoints": endpoints,
        }
    )


# path served before the api was versioned
router.add_api_route(
    "/system-info",
    show_system_info,
    methods=["GET"],
    response_class=PrettyJSONResponse,
    include_in_schema=False,
)
