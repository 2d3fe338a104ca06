"""
Domain Constants: 게이트웨이 전역 상수.

경로 분류, 보안 헤더, 에러 응답 등 요청 처리 전반에서 사용되는 값들.
"""

# =============================================================================
# Path Classification (경로 분류)
# =============================================================================
# /api/ 로 시작하는 경로만 sub-application으로 위임.
# 대소문자 구분, 정확한 prefix 매칭 ("/api" 단독, "/API/" 는 asset).

API_PATH_PREFIX = "/api/"

# =============================================================================
# Content-Security-Policy (Monaco Editor 허용 정책)
# =============================================================================
# Monaco Editor 동작 요건:
# - eval / inline script
# - blob: worker
# - ws:/wss: 연결 (agent stream)
#
# 배포별 설정 불가 (고정값). 변경 시 DESIGN.md 결정 사항도 갱신.

CSP_HEADER_NAME = "Content-Security-Policy"

CSP_DIRECTIVES = (
    "default-src 'self'",
    "script-src 'self' 'unsafe-eval' 'unsafe-inline' data: blob:",
    "style-src 'self' 'unsafe-inline' data:",
    "worker-src 'self' blob:",
    "child-src 'self' blob:",
    "font-src 'self' data:",
    "img-src 'self' data: blob:",
    "connect-src 'self' ws: wss: https:",
)

CONTENT_SECURITY_POLICY = "; ".join(CSP_DIRECTIVES) + ";"

# CSP 적용 대상 판별 (content-type 부분 문자열, 소문자 비교)
HTML_MEDIA_TYPE = "text/html"

# =============================================================================
# Error Responses
# =============================================================================

API_ERROR_STATUS = 500
API_ERROR_BODY = "API Error"

# =============================================================================
# Diagnostic Labels
# =============================================================================

LABEL_API_FAILED = "API request failed"
LABEL_WAIT_UNTIL_FAILED = "wait_until task failed"
