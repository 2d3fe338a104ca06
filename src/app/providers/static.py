"""
정적 디렉터리 Asset Provider.

fastapi.staticfiles.StaticFiles의 파일 조회만 재사용:
- html=True: 디렉터리 요청 → index.html, 404.html 있으면 사용
- not-found/405 등 HTTPException → 같은 상태 코드의 응답으로 변환
- spa_fallback: 확장자 없는 경로의 404 → index.html (클라이언트 라우팅)
"""

import logging
import posixpath
from pathlib import Path

from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import Scope

from src.app.providers.base import AssetProvider

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"


class StaticDirectoryAssets(AssetProvider):
    """
    로컬 디렉터리 기반 asset 저장소.

    디렉터리가 없어도 생성 가능 (모든 요청 404).
    """

    def __init__(
        self,
        directory: str | Path,
        html: bool = True,
        spa_fallback: bool = False,
    ) -> None:
        self.directory = Path(directory)
        self.spa_fallback = spa_fallback
        self.files = StaticFiles(directory=self.directory, html=html, check_dir=False)

        if not self.directory.is_dir():
            logger.warning(f"Asset directory does not exist: {self.directory}")

    async def fetch(self, request: Request) -> Response:
        scope = request.scope
        path = self.files.get_path(scope)

        try:
            return await self.files.get_response(path, scope)
        except HTTPException as e:
            if e.status_code == 404 and self._is_client_route(request.url.path):
                return await self._serve_index(scope, e)
            return _error_response(e)

    def _is_client_route(self, url_path: str) -> bool:
        """SPA fallback 대상: 확장자 없는 경로."""
        if not self.spa_fallback:
            return False
        return posixpath.splitext(url_path)[1] == ""

    async def _serve_index(self, scope: Scope, not_found: HTTPException) -> Response:
        try:
            return await self.files.get_response(INDEX_FILENAME, scope)
        except HTTPException:
            return _error_response(not_found)


def _error_response(e: HTTPException) -> Response:
    """StaticFiles HTTPException → 일반 응답."""
    return PlainTextResponse(e.detail, status_code=e.status_code, headers=e.headers)
