"""
Bootstrap tests for the closet planner: configuration loading, structured
logging and app wiring.
"""

import json
import logging
import random
import sys
from datetime import datetime, timezone
from importlib import import_module
from pathlib import Path
from typing import Tuple

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from closet_app.app import ClosetPlannerApp
from closet_app.config import ClosetConfig
from closet_app.logging_config import JsonFormatter, correlation_context, redact_for_log

_CONFIG_KEYS = (
    "USER_ID",
    "WARDROBE_DB_PATH",
    "LOG_LEVEL",
    "WEARER_NAME",
    "MAX_BOTTOM_USES",
    "RANDOM_SEED",
    "SEED_ON_START",
    "APP_ENV",
    "APP_CONFIG_PATH",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_config_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = ClosetConfig.from_env()
    assert config.user_id == "default"
    assert config.max_bottom_uses == 2
    assert config.random_seed is None
    assert config.seed_on_start is False
    assert config.environment is None


def test_config_reads_environment_yaml(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment YAML supplies values and environment variables override them."""

    env_dir = tmp_path / "environments"
    env_dir.mkdir()
    (env_dir / "staging.yaml").write_text(
        "# staging closet\n"
        "user_id: \"maya\"\n"
        "wardrobe_db_path: /tmp/closet.db\n"
        "max_bottom_uses: none\n"
        "random_seed: 7\n"
        "seed_on_start: yes\n"
        "log_level: debug\n"
    )
    clean_env.setenv("APP_ENV", "staging")
    clean_env.setenv("CLOSET_CONFIG_DIR", str(env_dir))
    clean_env.setenv("WEARER_NAME", "Maya")

    config = ClosetConfig.from_env()
    assert config.environment == "staging"
    assert config.user_id == "maya"
    assert config.wardrobe_db_path == "/tmp/closet.db"
    assert config.max_bottom_uses is None
    assert config.random_seed == 7
    assert config.seed_on_start is True
    assert config.log_level == "DEBUG"
    assert config.wearer_name == "Maya"


def test_json_formatter_redacts_sensitive_fields() -> None:
    record = logging.LogRecord("closet", logging.INFO, __file__, 1, "tool_call_started", None, None)
    record.event = "tool_call_started"
    record.kwargs = redact_for_log({"user_id": "maya", "image_urls": ["https://cdn/x.png"], "slot": "top"})

    with correlation_context("abc123"):
        payload = json.loads(JsonFormatter().format(record))

    assert payload["event"] == "tool_call_started"
    assert payload["correlation_id"] == "abc123"
    assert payload["kwargs"] == {"user_id": "[redacted]", "image_urls": "[redacted]", "slot": "top"}
    assert redact_for_log("reach me at maya@example.com") == "reach me at [redacted-email]"


def test_app_seeds_an_empty_wardrobe(tmp_path: Path) -> None:
    config = ClosetConfig(wardrobe_db_path=str(tmp_path / "seed.db"), seed_on_start=True, environment="test")
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    closet = ClosetPlannerApp(config=config, clock=lambda: now, rng=random.Random(1))

    items = closet.wardrobe.snapshot()
    assert len(items) == 15
    assert {item.slot for item in items} == {"top", "bottom"}
    assert closet.health() == {
        "status": "ok",
        "service": "closet-planner",
        "environment": "test",
        "timestamp": now.isoformat(),
    }

    ClosetPlannerApp(config=config, clock=lambda: now)
    assert len(closet.wardrobe.snapshot()) == 15


def test_seeded_wardrobe_plans_a_full_week(tmp_path: Path) -> None:
    config = ClosetConfig(wardrobe_db_path=str(tmp_path / "week.db"), seed_on_start=True)
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    closet = ClosetPlannerApp(config=config, clock=lambda: now, rng=random.Random(4))

    week = closet.planner.generate_weekly_outfits()
    assert week["status"] == "ok"
    assert len({entry["outfit"]["top"]["item_id"] for entry in week["week"]}) == 5


@pytest.mark.parametrize(
    "module_path, public_members",
    [
        ("models.color_theory", ("classify_harmony", "HarmonyResult")),
        ("logic.outfit_selector", ("generate_daily_outfit", "generate_weekly_outfits")),
        ("tools.wardrobe_store", ("WardrobeStore", "SQLiteWardrobeStore")),
        ("tools.wardrobe_tools", ("WardrobeTools",)),
        ("tools.planner_tools", ("PlannerTools",)),
        ("tools.seed_wardrobe", ("seed_wardrobe", "STARTER_ITEMS")),
        ("server.api", ("create_app", "get_app")),
    ],
)
def test_modules_export_expected_members(module_path: str, public_members: Tuple[str, ...]) -> None:
    """Modules should import cleanly and expose expected members."""

    module = import_module(module_path)
    for member in public_members:
        assert hasattr(module, member), f"{module_path} is missing {member}"
