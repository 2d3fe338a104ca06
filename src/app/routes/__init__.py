"""
FastAPI Routes.

API sub-application 라우트 (/api/ prefix는 api.py에서 부여)
"""

from . import system

__all__ = ["system"]
