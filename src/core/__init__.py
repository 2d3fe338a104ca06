"""
Core layer: 요청 분류/위임/응답 재작성.

이 모듈만 건드리면 전 트래픽 영향 → 가장 보수적으로 관리

역할:
- 경로 분류 (/api/ vs asset)
- HTML 응답 CSP 재작성
- API 위임 실패 → 500 변환, diagnostic 기록
"""

from .gateway import api_error_response, dispatch_api, handle, is_api_path, is_html, rewrite
from .logging import configure_logging, emit, report_error

__all__ = [
    # gateway
    "handle",
    "is_api_path",
    "is_html",
    "rewrite",
    "dispatch_api",
    "api_error_response",
    # logging
    "report_error",
    "emit",
    "configure_logging",
]
