"""
Edge Gateway 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
- 직접: python -m src.app.main

라우팅:
- /api/* → API sub-application (src/app/api.py)
- 그 외 → 정적 asset (HTML이면 CSP 헤더 추가)
"""

import logging

from src.app.api import create_api_app
from src.app.config import GatewaySettings, load_config
from src.app.gateway import Gateway
from src.app.providers import ASGISubApplication, StaticDirectoryAssets
from src.core.logging import configure_logging
from src.domain.schemas import Bindings

logger = logging.getLogger(__name__)


# =============================================================================
# App Factory
# =============================================================================


def create_bindings(settings: GatewaySettings) -> Bindings:
    """설정 → collaborator 바인딩."""
    return Bindings(
        assets=StaticDirectoryAssets(
            settings.assets_dir,
            html=True,
            spa_fallback=settings.spa_fallback,
        ),
        api=ASGISubApplication(create_api_app),
        vars=settings.vars,
    )


def create_app(settings: GatewaySettings | None = None) -> Gateway:
    """
    Gateway 앱 생성.

    Args:
        settings: 실행 설정 (None이면 load_config()에서 로드)

    Returns:
        ASGI 앱
    """
    if settings is None:
        settings = GatewaySettings.from_config(load_config())

    logger.info(f"Serving assets from {settings.assets_dir}")
    return Gateway(create_bindings(settings))


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    settings = GatewaySettings.from_config(load_config())
    configure_logging(settings.log_level)

    uvicorn.run(
        "src.app.main:app",
        host=settings.host,
        port=settings.port,
    )
