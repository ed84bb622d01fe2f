import asyncio
import json
import logging

from fastapi import APIRouter, Depends, Path
from fastapi.responses import StreamingResponse

from jmeter_web.core.config import Settings
from jmeter_web.dependencies import get_job_registry, get_settings
from jmeter_web.services.testing.job_registry import Job, JobRegistry

logger = logging.getLogger(__name__)
router = APIRouter()


async def event_stream(job: Job, poll_interval: float):
    """실행 상태를 주기적으로 스트리밍하고, 종료 상태(completed | error)를 보낸 뒤 연결 종료"""
    test_id = job.test_id
    logger.info(f"Starting SSE stream for test: {test_id}")

    while True:
        # 같은 ID 로 새 실행이 등록되어도 구독을 시작한 실행의 상태만 전송
        response = job.response
        yield f"data: {json.dumps(response.to_wire(), ensure_ascii=False)}\n\n"

        if response.status.is_terminal:
            logger.info(f"Test {test_id} finished with status {response.status.value}, closing SSE connection")
            break

        await asyncio.sleep(poll_interval)


@router.get(
    '/sse/jobs/{test_id}',
    summary="🔄 SSE 실행 상태 스트리밍",
    description="""실행 상태(TestResponse)를 Server-Sent Events 로 스트리밍합니다.

```javascript
const eventSource = new EventSource('/sse/jobs/load_20250908_123456');
eventSource.onmessage = function(event) {
    const data = JSON.parse(event.data);
    if (data.status !== 'pending') eventSource.close();
};
```

- **업데이트 주기**: SSE_POLL_INTERVAL 초
- 완료(completed) 또는 실패(error) 이벤트 전송 후 연결 종료
- 알 수 없는 testId 는 404""",
)
async def sse_job_status(
        test_id: str = Path(..., description="상태를 추적할 실행 ID"),
        registry: JobRegistry = Depends(get_job_registry),
        settings: Settings = Depends(get_settings),
):
    # 스트림 시작 전에 존재 여부 확인 (없으면 404)
    job = registry.get_job(test_id)

    return StreamingResponse(
        event_stream(job, settings.SSE_POLL_INTERVAL),
        media_type="text/event-stream",
    )
