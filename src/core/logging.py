"""
Diagnostic logging: 에러 기록, 로깅 설정

규칙:
- 에러 상세는 로그에만 기록 (클라이언트 응답에 포함 금지)
- diagnostic sink 자체의 실패는 호출자에게 전파하지 않음
"""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# (error, label) → None
DiagnosticSink = Callable[[BaseException, str], None]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# =============================================================================
# Diagnostic Sink
# =============================================================================


def report_error(error: BaseException, label: str) -> None:
    """
    기본 diagnostic sink.

    Args:
        error: 원인 예외
        label: 짧은 설명 (예: "API request failed")
    """
    try:
        logger.error(f"{label}: {error!r}", exc_info=error)
    except Exception:  # noqa: BLE001 - sink는 절대 실패하지 않음
        pass


def emit(sink: DiagnosticSink, error: BaseException, label: str) -> None:
    """
    임의의 sink 호출 (fire-and-forget).

    주입된 sink가 예외를 던져도 게이트웨이 응답에는 영향 없음.
    """
    try:
        sink(error, label)
    except Exception as e:  # noqa: BLE001
        logger.warning(f"Diagnostic sink failed while reporting {label!r}: {e}")


# =============================================================================
# Setup
# =============================================================================


def configure_logging(level: str | int = "INFO") -> None:
    """
    프로세스 로깅 설정 (시작 시 1회).

    Args:
        level: 로그 레벨 이름 또는 숫자
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
