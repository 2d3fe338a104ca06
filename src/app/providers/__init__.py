"""
Collaborator Providers.

게이트웨이는 인터페이스(base)에만 의존.
구현은 main.py에서 조립.
"""

from .asgi import ASGISubApplication
from .base import AssetProvider, SubApplication
from .static import StaticDirectoryAssets

__all__ = [
    "AssetProvider",
    "SubApplication",
    "StaticDirectoryAssets",
    "ASGISubApplication",
]
