"""
Gateway ASGI 앱: uvicorn이 직접 서빙하는 진입점.

역할:
- http: Request 생성 → core.gateway.handle() → 응답 전송
- 응답 전송 후 ExecutionContext.wait_until() 작업 완료 대기
- lifespan: 즉시 complete (게이트웨이 소유 리소스 없음)
- websocket: 미지원 (accept 전 close)
"""

import asyncio
import logging

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

from src.core.gateway import handle
from src.core.logging import DiagnosticSink, emit, report_error
from src.domain.constants import LABEL_WAIT_UNTIL_FAILED
from src.domain.schemas import Bindings, ExecutionContext

logger = logging.getLogger(__name__)


class Gateway:
    """
    Edge Gateway ASGI 애플리케이션.

    Usage:
        env = Bindings(assets=StaticDirectoryAssets("public"),
                       api=ASGISubApplication(create_api_app))
        app = Gateway(env)
    """

    def __init__(self, env: Bindings, report: DiagnosticSink = report_error) -> None:
        self.env = env
        self.report = report

    async def handle(self, request: Request, ctx: ExecutionContext) -> Response:
        """요청 1건 처리 (바인딩/sink 고정)."""
        return await handle(request, self.env, ctx, self.report)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return

        if scope["type"] == "websocket":
            await receive()  # websocket.connect
            await send({"type": "websocket.close", "code": 1000})
            return

        request = Request(scope, receive)
        ctx = ExecutionContext()
        response = await self.handle(request, ctx)
        try:
            await response(scope, receive, send)
        finally:
            await self._drain(ctx)

    async def _drain(self, ctx: ExecutionContext) -> None:
        """wait_until 작업 완료 대기. 실패는 sink로만 기록."""
        if not ctx.pending:
            return

        results = await asyncio.gather(*ctx.pending, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                emit(self.report, result, LABEL_WAIT_UNTIL_FAILED)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.info("Gateway started")
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
