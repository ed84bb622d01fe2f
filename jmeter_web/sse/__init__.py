from jmeter_web.sse.sse_job_status import router as sse_job_status_router
from fastapi import APIRouter

sse_router = APIRouter()
sse_router.include_router(sse_job_status_router)

__all__ = ["sse_router"]
