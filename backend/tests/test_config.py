import os
import sys

import pytest
from unittest.mock import patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig, ENV_VARS, _sanitize_env_value


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.setattr('config.load_dotenv', lambda *a, **k: False)
    for env_name in ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)
    return monkeypatch


def test_defaults_match_session_constants():
    config = GameConfig()
    assert config.width == 32
    assert config.height == 16
    assert config.tick_interval_ms == 100
    assert config.initial_score == 5
    assert config.seed is None
    assert config.max_ticks is None
    assert config.tick_interval == pytest.approx(0.1)


def test_from_env_without_variables_uses_defaults(clean_env):
    assert GameConfig.from_env() == GameConfig()


def test_from_env_reads_snake_variables(clean_env):
    clean_env.setenv("SNAKE_WIDTH", "40")
    clean_env.setenv("SNAKE_HEIGHT", " 20 ")
    clean_env.setenv("SNAKE_TICK_INTERVAL_MS", '"50"')
    clean_env.setenv("SNAKE_INITIAL_SCORE", "0")
    clean_env.setenv("SNAKE_SEED", "7")

    config = GameConfig.from_env()

    assert config.width == 40
    assert config.height == 20
    assert config.tick_interval_ms == 50
    assert config.initial_score == 0
    assert config.seed == 7


def test_from_env_rejects_non_integer(clean_env):
    clean_env.setenv("SNAKE_WIDTH", "wide")
    with pytest.raises(ValueError, match="SNAKE_WIDTH"):
        GameConfig.from_env()


def test_from_env_validates(clean_env):
    clean_env.setenv("SNAKE_HEIGHT", "2")
    with pytest.raises(ValueError):
        GameConfig.from_env()


def test_from_env_loads_dotenv_file(tmp_path, monkeypatch):
    for env_name in ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("SNAKE_WIDTH=24\nSNAKE_MAX_TICKS=10\n")

    # load_dotenv exports into os.environ, so keep it scoped to this test
    with patch.dict(os.environ):
        config = GameConfig.from_env(str(env_file))

    assert config.width == 24
    assert config.max_ticks == 10


@pytest.mark.parametrize("kwargs", [
    {"width": 2},
    {"height": 0},
    {"tick_interval_ms": -1},
    {"max_ticks": 0},
])
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs).validate()


def test_smallest_board_is_valid():
    assert GameConfig(width=3, height=3).validate().width == 3


def test_with_overrides_ignores_none():
    config = GameConfig(width=20).with_overrides(width=None, height=12, seed=3, unknown=1)
    assert config.width == 20
    assert config.height == 12
    assert config.seed == 3


def test_sanitize_env_value():
    assert _sanitize_env_value(None) is None
    assert _sanitize_env_value("  12 ") == "12"
    assert _sanitize_env_value("'12'") == "12"
    assert _sanitize_env_value('""') is None
