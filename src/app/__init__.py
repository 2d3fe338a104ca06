"""
App layer: ASGI 서버 (Gateway) + collaborator 구현.

역할:
- Gateway ASGI 앱, 설정 로드, 진입점
- providers/ → asset 저장소, sub-application 어댑터
- api.py + routes/ → /api/ sub-application
- ⚠️ 분류/재작성 로직 없음 (core에 위임)
"""
