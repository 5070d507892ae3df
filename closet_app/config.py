"""Configuration helpers for the closet planner app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_DB_PATH = "data/wardrobe.db"
DEFAULT_MAX_BOTTOM_USES = 2


def _parse_optional_int(value: Optional[str], default: Optional[int]) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return default
    if str(value).strip().lower() in {"none", "null", "off"}:
        return None
    return int(value)


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or str(value).strip() == "":
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ClosetConfig:
    """Configuration values for the closet planner.

    One process serves one wardrobe owner; ``user_id`` scopes every store
    query. ``max_bottom_uses`` is the weekly bottom exclusion threshold and
    ``random_seed`` pins the planner's random source for reproducible plans.
    """

    user_id: str = "default"
    wardrobe_db_path: str = DEFAULT_DB_PATH
    log_level: str = "INFO"
    wearer_name: Optional[str] = None
    max_bottom_uses: Optional[int] = DEFAULT_MAX_BOTTOM_USES
    random_seed: Optional[int] = None
    seed_on_start: bool = False
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "ClosetConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key by upper-cased environment
        variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("CLOSET_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            user_id=str(get_value("user_id", "default") or "default"),
            wardrobe_db_path=str(get_value("wardrobe_db_path", DEFAULT_DB_PATH) or DEFAULT_DB_PATH),
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            wearer_name=get_value("wearer_name"),
            max_bottom_uses=_parse_optional_int(get_value("max_bottom_uses"), DEFAULT_MAX_BOTTOM_USES),
            random_seed=_parse_optional_int(get_value("random_seed"), None),
            seed_on_start=_parse_bool(get_value("seed_on_start")),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal ``key: value`` YAML file without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
