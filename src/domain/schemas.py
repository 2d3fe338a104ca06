"""
Data schemas for the gateway.

규칙:
- 요청 간 공유되는 가변 상태 없음 → 모든 객체는 요청 단위로 생성
- 플랫폼 바인딩은 전역 대신 Bindings로 명시 전달
- 위임 결과는 예외 대신 DispatchOutcome 값으로 표현
"""

from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from starlette.responses import Response

if TYPE_CHECKING:
    from src.app.providers.base import AssetProvider, SubApplication

# =============================================================================
# Bindings / Execution Context
# =============================================================================

@dataclass
class Bindings:
    """
    게이트웨이 collaborator 바인딩.

    assets: 정적 asset 저장소 (non-API 경로)
    api: sub-application (/api/ 경로)
    vars: sub-application에 전달되는 배포 값 (secret 금지)
    """
    assets: "AssetProvider"
    api: "SubApplication"
    vars: dict[str, Any] = field(default_factory=dict)


@dataclass
class ExecutionContext:
    """
    요청 단위 실행 컨텍스트.

    wait_until()으로 등록한 작업은 응답 전송 후 완료까지 대기.
    게이트웨이 자체는 등록하지 않음 (sub-application 전용).
    """
    pending: list[Awaitable[Any]] = field(default_factory=list)

    def wait_until(self, awaitable: Awaitable[Any]) -> None:
        """응답 이후 완료되어야 하는 작업 등록."""
        self.pending.append(awaitable)


# =============================================================================
# Dispatch Outcome
# =============================================================================

@dataclass(frozen=True)
class Dispatched:
    """위임 성공: sub-application 응답 그대로."""
    response: Response


@dataclass(frozen=True)
class DispatchFailed:
    """위임 실패: 원인 예외 (클라이언트 비노출)."""
    cause: BaseException


DispatchOutcome = Union[Dispatched, DispatchFailed]
