"""
Error definitions for the gateway.

규칙:
- 클라이언트에는 에러 상세 노출 금지 → 500 / "API Error" 고정 응답
- 원인은 diagnostic sink(로그)로만 기록
- collaborator가 응답을 만들지 못한 경우도 DispatchError로 명시적 실패
"""

from typing import Any


class DispatchError(Exception):
    """
    Sub-application 위임 실패 시 발생하는 에러.

    collaborator가 예외 없이 "응답 없음"으로 끝난 경우에 사용:
    - ASGI 앱이 http.response.start 없이 종료
    - dispatch() 반환값이 Response가 아님

    Usage:
        raise DispatchError("NO_RESPONSE", path="/api/agent")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === API Dispatch ===
    NO_RESPONSE = "NO_RESPONSE"            # 앱이 응답을 시작하지 않음
    INVALID_RESPONSE = "INVALID_RESPONSE"  # Response 이외의 반환값
