"""
Collaborator 추상 인터페이스.

게이트웨이가 호출하는 외부 구성요소:
- AssetProvider: 정적 파일 (non-API 경로)
- SubApplication: /api/ 트래픽 처리

구현 교체 가능하게 설계 (테스트에서는 fake 주입).
"""

from abc import ABC, abstractmethod

from starlette.requests import Request
from starlette.responses import Response

from src.domain.schemas import Bindings, ExecutionContext

# =============================================================================
# Abstract Providers
# =============================================================================

class AssetProvider(ABC):
    """
    정적 asset Provider 추상 인터페이스.

    역할: 요청 경로에 가장 잘 맞는 정적 리소스 반환
    """

    @abstractmethod
    async def fetch(self, request: Request) -> Response:
        """
        요청에 해당하는 정적 리소스 조회.

        Args:
            request: 수정되지 않은 원본 요청

        Returns:
            Response (없는 파일은 404 응답)

        not-found 같은 일반적인 경우에는 예외를 던지지 않음.
        """
        ...


class SubApplication(ABC):
    """
    Sub-application 추상 인터페이스.

    역할: /api/ 라우팅 테이블 전체 (인증, DB 등은 이 뒤에 위치)
    """

    @abstractmethod
    async def dispatch(
        self,
        request: Request,
        env: Bindings,
        ctx: ExecutionContext,
    ) -> Response:
        """
        API 요청 처리.

        Args:
            request: 원본 요청
            env: 게이트웨이 바인딩
            ctx: 요청 단위 실행 컨텍스트

        Returns:
            Response

        Raises:
            처리 실패 시 임의의 예외 (게이트웨이가 500으로 변환)
        """
        ...
