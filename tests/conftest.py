"""
Pytest fixtures for the gateway tests.

구성:
- ASGI scope / Request 생성 헬퍼
- collaborator mock (asset, sub-application)
- diagnostic sink 기록용 fixture
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from src.domain.schemas import Bindings, ExecutionContext

# =============================================================================
# Request Helpers
# =============================================================================


def make_scope(path: str, method: str = "GET", headers: list | None = None) -> dict[str, Any]:
    """테스트용 http scope."""
    return {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "client": ("testclient", 50000),
        "root_path": "",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": headers or [],
    }


def make_request(path: str, method: str = "GET", body: bytes = b"") -> Request:
    """테스트용 Request (body 1회 전달)."""

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(make_scope(path, method), receive)


@pytest.fixture
def request_factory() -> Callable[..., Request]:
    """make_request fixture 버전."""
    return make_request


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def assets() -> MagicMock:
    """asset collaborator mock (fetch 반환값은 테스트에서 지정)."""
    provider = MagicMock()
    provider.fetch = AsyncMock()
    return provider


@pytest.fixture
def api() -> MagicMock:
    """sub-application collaborator mock."""
    provider = MagicMock()
    provider.dispatch = AsyncMock()
    return provider


@pytest.fixture
def env(assets: MagicMock, api: MagicMock) -> Bindings:
    """mock collaborator 바인딩."""
    return Bindings(assets=assets, api=api, vars={"environment": "test"})


@pytest.fixture
def ctx() -> ExecutionContext:
    """빈 실행 컨텍스트."""
    return ExecutionContext()


@pytest.fixture
def sink() -> MagicMock:
    """diagnostic sink 기록용 mock."""
    return MagicMock()


# =============================================================================
# Asset Directory Fixtures
# =============================================================================


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """
    정적 asset 디렉터리.

    포함:
    - index.html
    - assets/app.js
    - assets/style.css
    - docs/index.html
    """
    root = tmp_path / "public"
    (root / "assets").mkdir(parents=True)
    (root / "docs").mkdir()

    (root / "index.html").write_text(
        "<!DOCTYPE html><html><body>home</body></html>", encoding="utf-8"
    )
    (root / "assets" / "app.js").write_text("console.log('app');", encoding="utf-8")
    (root / "assets" / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    (root / "docs" / "index.html").write_text(
        "<html><body>docs</body></html>", encoding="utf-8"
    )

    return root
