"""
Gateway core: 요청 분류, 위임, HTML 응답 CSP 재작성.

요청당 흐름 (고정 순서):
    classify → delegate → (HTML이면 rewrite) → return

규칙:
- 요청 1건당 downstream 호출 정확히 1회 (asset fetch 또는 API dispatch)
- API 위임 실패는 500 / "API Error"로 변환, 원인은 sink로만 기록
- asset 응답은 상태 코드와 무관하게 그대로 통과 (HTML이면 CSP만 추가)
- 요청 간 공유 상태 없음
"""

import copy

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from src.core.logging import DiagnosticSink, emit, report_error
from src.domain.constants import (
    API_ERROR_BODY,
    API_ERROR_STATUS,
    API_PATH_PREFIX,
    CONTENT_SECURITY_POLICY,
    CSP_HEADER_NAME,
    HTML_MEDIA_TYPE,
    LABEL_API_FAILED,
)
from src.domain.errors import DispatchError, ErrorCodes
from src.domain.schemas import (
    Bindings,
    DispatchFailed,
    Dispatched,
    DispatchOutcome,
    ExecutionContext,
)

# =============================================================================
# Classification
# =============================================================================


def is_api_path(path: str) -> bool:
    """/api/ prefix 여부 (대소문자 구분)."""
    return path.startswith(API_PATH_PREFIX)


def is_html(response: Response) -> bool:
    """
    content-type에 text/html 포함 여부.

    대소문자 무시 부분 문자열 매칭. 헤더가 없으면 False.
    """
    content_type = response.headers.get("content-type")
    if content_type is None:
        return False
    return HTML_MEDIA_TYPE in content_type.lower()


# =============================================================================
# Response Rewrite
# =============================================================================


def rewrite(response: Response, policy: str = CONTENT_SECURITY_POLICY) -> Response:
    """
    CSP 헤더를 설정한 새 응답 생성.

    원본 응답은 수정하지 않음. status, body(또는 body stream),
    나머지 헤더(다중 값 포함)는 그대로 복사.

    Args:
        response: asset collaborator 응답
        policy: CSP 값 (기본: 고정 정책)

    Returns:
        새 Response 객체 (같은 클래스)
    """
    rewritten = copy.copy(response)

    # 헤더 리스트/캐시는 원본과 분리
    rewritten.__dict__.pop("_headers", None)
    rewritten.raw_headers = list(response.raw_headers)

    rewritten.headers[CSP_HEADER_NAME] = policy
    return rewritten


# =============================================================================
# API Dispatch
# =============================================================================


async def dispatch_api(
    request: Request,
    env: Bindings,
    ctx: ExecutionContext,
) -> DispatchOutcome:
    """
    Sub-application 위임.

    예외, 또는 Response가 아닌 반환값 → DispatchFailed.
    CancelledError 등 BaseException은 그대로 전파 (런타임 취소).

    Args:
        request: 원본 요청
        env: 바인딩
        ctx: 실행 컨텍스트

    Returns:
        Dispatched 또는 DispatchFailed
    """
    try:
        response = await env.api.dispatch(request, env, ctx)
    except Exception as e:
        return DispatchFailed(cause=e)

    if not isinstance(response, Response):
        return DispatchFailed(
            cause=DispatchError(
                ErrorCodes.INVALID_RESPONSE,
                path=request.url.path,
                returned=type(response).__name__,
            )
        )

    return Dispatched(response=response)


def api_error_response() -> Response:
    """고정 500 응답 (에러 상세 미포함)."""
    return PlainTextResponse(API_ERROR_BODY, status_code=API_ERROR_STATUS)


# =============================================================================
# Handle
# =============================================================================


async def handle(
    request: Request,
    env: Bindings,
    ctx: ExecutionContext,
    report: DiagnosticSink = report_error,
) -> Response:
    """
    요청 1건 처리.

    Args:
        request: 인바운드 요청
        env: collaborator 바인딩
        ctx: 요청 단위 실행 컨텍스트
        report: diagnostic sink (API 실패 시 1회 호출)

    Returns:
        Response (항상 정확히 1개)
    """
    if not is_api_path(request.url.path):
        response = await env.assets.fetch(request)
        if is_html(response):
            return rewrite(response)
        return response

    outcome = await dispatch_api(request, env, ctx)
    if isinstance(outcome, Dispatched):
        return outcome.response

    emit(report, outcome.cause, LABEL_API_FAILED)
    return api_error_response()
