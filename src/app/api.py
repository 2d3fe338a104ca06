"""
API Sub-application: /api/ 트래픽 전담 FastAPI 앱.

게이트웨이가 ASGISubApplication으로 in-process 실행.
라우트 추가 시 여기서 include_router.
"""

from fastapi import FastAPI

from src.app.routes import system
from src.domain.schemas import Bindings


def create_api_app(env: Bindings) -> FastAPI:
    """
    Sub-application 생성.

    Args:
        env: 게이트웨이 바인딩 (핸들러에서는 request.state.env)

    Returns:
        FastAPI 앱
    """
    app = FastAPI(
        title="Edge Gateway API",
        version="0.1.0",
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        redoc_url=None,
    )
    app.include_router(system.api_router, prefix="/api", tags=["System API"])

    return app
