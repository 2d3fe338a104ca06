"""
Gateway 설정 로드.

우선순위:
1. GATEWAY_CONFIG 환경변수가 가리키는 YAML
2. 프로젝트 루트의 default.yaml
3. 파일이 없으면 코드 기본값

CSP 정책은 설정 대상 아님 (domain.constants 고정값).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_ENV_VAR = "GATEWAY_CONFIG"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


@dataclass
class GatewaySettings:
    """
    게이트웨이 실행 설정.

    assets_dir 상대 경로는 프로젝트 루트 기준.
    """
    host: str = "127.0.0.1"
    port: int = 8000
    assets_dir: Path = PROJECT_ROOT / "public"
    spa_fallback: bool = True
    log_level: str = "INFO"
    vars: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "GatewaySettings":
        """load_config() 결과 → GatewaySettings."""
        server = config.get("server") or {}
        assets = config.get("assets") or {}
        logging_cfg = config.get("logging") or {}

        assets_dir = Path(assets.get("directory", "public"))
        if not assets_dir.is_absolute():
            assets_dir = PROJECT_ROOT / assets_dir

        return cls(
            host=str(server.get("host", cls.host)),
            port=int(server.get("port", cls.port)),
            assets_dir=assets_dir,
            spa_fallback=bool(assets.get("spa_fallback", cls.spa_fallback)),
            log_level=str(logging_cfg.get("level", cls.log_level)),
            vars=dict(config.get("vars") or {}),
        )
