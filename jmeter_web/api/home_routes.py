import logging
import os

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from jmeter_web.common.exception.api_exception import ApiException
from jmeter_web.common.response.code import FailureCode
from jmeter_web.core.config import Settings
from jmeter_web.dependencies import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    path="/",
    summary="홈페이지",
    description="TEMPLATE_PATH 의 템플릿을 렌더링합니다. 템플릿을 불러올 수 없으면 500 을 반환합니다.",
    response_class=HTMLResponse,
)
async def serve_homepage(request: Request, settings: Settings = Depends(get_settings)):
    template_dir, template_name = os.path.split(settings.TEMPLATE_PATH)

    # 요청마다 템플릿 파일을 다시 읽음
    templates = Jinja2Templates(directory=template_dir or ".")
    try:
        return templates.TemplateResponse(request, template_name)
    except (TemplateError, OSError) as e:
        logger.error(f"Failed to load template {settings.TEMPLATE_PATH}: {e}")
        raise ApiException(FailureCode.TEMPLATE_LOAD_FAILED, f"{FailureCode.TEMPLATE_LOAD_FAILED.message()}: {e}")


@router.get(
    path="/health",
    summary="health check",
    description="health check 용 엔드포인트"
)
async def health():
    return "ok"
