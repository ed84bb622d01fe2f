from fastapi import APIRouter

from jmeter_web.api.home_routes import router as home_router
from jmeter_web.api.test_plan_router import router as test_plan_router
from jmeter_web.api.load_testing_router import router as load_testing_router
from jmeter_web.api.report_router import router as report_router
from jmeter_web.api.job_router import router as job_router

api_router = APIRouter()
api_router.include_router(
    home_router,
    tags=["home"],
)

api_router.include_router(
    test_plan_router,
    tags=["Test Plan"]
)

api_router.include_router(
    load_testing_router,
    tags=["Load Testing"]
)

api_router.include_router(
    report_router,
    tags=["Report"]
)

api_router.include_router(
    job_router,
    prefix="/jobs",
    tags=["Job"]
)
