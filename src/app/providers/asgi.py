"""
In-process ASGI Sub-application.

FastAPI(또는 임의의 ASGI) 앱을 같은 프로세스에서 실행하고
응답 메시지를 모아 Response로 반환.

주의:
- 응답 body는 버퍼링됨 (스트리밍 응답도 완료 후 반환)
- 앱 예외는 그대로 전파 → 게이트웨이가 500으로 변환
- 앱 lifespan은 실행하지 않음
"""

from collections.abc import Callable

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message

from src.app.providers.base import SubApplication
from src.domain.errors import DispatchError, ErrorCodes
from src.domain.schemas import Bindings, ExecutionContext

# (bindings) → ASGI app
AppFactory = Callable[[Bindings], ASGIApp]


class ASGISubApplication(SubApplication):
    """
    ASGI 앱 어댑터.

    app_factory(env)는 첫 dispatch에서 1회 호출 (바인딩은 프로세스 단위 고정).
    핸들러에서는 request.state.env / request.state.ctx로 접근.
    """

    def __init__(self, app_factory: AppFactory) -> None:
        self.app_factory = app_factory
        self._app: ASGIApp | None = None

    def get_app(self, env: Bindings) -> ASGIApp:
        if self._app is None:
            self._app = self.app_factory(env)
        return self._app

    async def dispatch(
        self,
        request: Request,
        env: Bindings,
        ctx: ExecutionContext,
    ) -> Response:
        app = self.get_app(env)

        scope = dict(request.scope)
        scope["state"] = {**request.scope.get("state", {}), "env": env, "ctx": ctx}

        status: int | None = None
        headers: list[tuple[bytes, bytes]] = []
        body = bytearray()

        async def send(message: Message) -> None:
            nonlocal status, headers
            if message["type"] == "http.response.start":
                status = message["status"]
                headers = [(bytes(k), bytes(v)) for k, v in message.get("headers", [])]
            elif message["type"] == "http.response.body":
                body.extend(message.get("body", b""))

        await app(scope, request.receive, send)

        if status is None:
            raise DispatchError(ErrorCodes.NO_RESPONSE, path=request.url.path)

        response = Response(content=bytes(body), status_code=status)
        response.raw_headers = headers
        return response
