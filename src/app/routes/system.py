"""
System Routes: sub-application 기본 엔드포인트.

- GET /api/health → 헬스 체크
- GET /api/config → 프론트엔드용 런타임 설정 (Bindings.vars)
"""

from typing import Any

from fastapi import APIRouter, Request

api_router = APIRouter()


@api_router.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


@api_router.get("/config")
async def runtime_config(request: Request) -> dict[str, Any]:
    """배포 값 조회 (secret 미포함)."""
    env = request.state.env
    return dict(env.vars)
