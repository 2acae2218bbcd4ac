# adaptive_core/config.py

"""
Session configuration.

Defaults live in DEFAULT_SESSION_SETTINGS; each can be overridden through
environment variables (usually from the project's .env file, loaded by the
entry points with python-dotenv):

    ADAPTIVE_TARGET_QUESTIONS=10
    ADAPTIVE_MIN_QUESTIONS=5
    ADAPTIVE_MAX_TIME_MINUTES=30
    ADAPTIVE_STARTING_DIFFICULTY=5
    ADAPTIVE_ADAPTATION_RATE=0.5
    ADAPTIVE_TERMINATION_CONFIDENCE=0.9
    ADAPTIVE_CATALOG_DIR=data/catalog
"""

import os
from typing import Any, Callable, Dict, Mapping, Optional

from .catalog import DEFAULT_CATALOG_DIR
from .errors import ConfigError
from .schema import ABILITY_MIN, ABILITY_MAX, SessionConfig

ENV_PREFIX = "ADAPTIVE_"
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_SESSION_SETTINGS: Dict[str, Any] = {
    "target_questions": 10,
    "min_questions": 5,
    "max_time_minutes": 30.0,
    "starting_difficulty": 5.0,
    "adaptation_rate": 0.5,
    "termination_confidence": 0.9,
}

_CASTS: Dict[str, Callable[[str], Any]] = {
    "target_questions": int,
    "min_questions": int,
    "max_time_minutes": float,
    "starting_difficulty": float,
    "adaptation_rate": float,
    "termination_confidence": float,
}


def _env_value(env: Mapping[str, str], name: str) -> Any:
    key = ENV_PREFIX + name.upper()
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return DEFAULT_SESSION_SETTINGS[name]
    try:
        return _CASTS[name](raw.strip())
    except ValueError:
        raise ConfigError(f"{key}={raw!r} is not a valid {_CASTS[name].__name__}", field_name=name)


def validate_config(config: SessionConfig) -> SessionConfig:
    """Range checks for a SessionConfig; returns it unchanged when valid."""
    if not config.skill:
        raise ConfigError("skill must not be empty", field_name="skill")
    if config.target_questions < 1:
        raise ConfigError("target_questions must be >= 1", field_name="target_questions")
    if not (0 <= config.min_questions <= config.target_questions):
        raise ConfigError("min_questions must be between 0 and target_questions", field_name="min_questions")
    if config.max_time_minutes <= 0:
        raise ConfigError("max_time_minutes must be positive", field_name="max_time_minutes")
    if not (ABILITY_MIN <= config.starting_difficulty <= ABILITY_MAX):
        raise ConfigError("starting_difficulty must be within 1-10", field_name="starting_difficulty")
    if not (0.1 <= config.adaptation_rate <= 1.0):
        raise ConfigError("adaptation_rate must be within 0.1-1.0", field_name="adaptation_rate")
    if not (0.0 <= config.termination_confidence <= 1.0):
        raise ConfigError("termination_confidence must be within 0-1", field_name="termination_confidence")
    return config


def load_session_config(skill: str, env: Optional[Mapping[str, str]] = None) -> SessionConfig:
    env = os.environ if env is None else env
    values = {name: _env_value(env, name) for name in DEFAULT_SESSION_SETTINGS}
    return validate_config(SessionConfig(skill=skill, **values))


def catalog_dir(env: Optional[Mapping[str, str]] = None) -> str:
    """ADAPTIVE_CATALOG_DIR if set (relative paths resolve against the project root), else the bundled catalog."""
    env = os.environ if env is None else env
    path = (env.get(ENV_PREFIX + "CATALOG_DIR") or "").strip()
    if not path:
        return DEFAULT_CATALOG_DIR
    path = os.path.expanduser(path)
    if not os.path.isabs(path):
        path = os.path.join(PROJECT_ROOT, path)
    return os.path.normpath(path)
