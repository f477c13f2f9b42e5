from fastapi import APIRouter

from sysinfo_core.api.api_v1.endpoints import system_info_api

api_router = APIRouter()

api_router.include_router(system_info_api.router, prefix="/system", tags=["system"])
