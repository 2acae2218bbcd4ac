# adaptive_core/__init__.py

"""
Adaptive Assessment Engine

Includes:
- Logistic ability update with partial credit and latency adjustment
- Next-question selection targeting the current ability estimate
- Termination policy (question count, confidence, streaks)
- Final report: level, percentile, strengths/weaknesses per difficulty band
- Question catalog loading and session configuration

Common exports:
    Question, ResponseRecord, SessionState, SessionConfig, AdaptiveResult
    initialize_session, select_next_question, update_ability_estimate
    should_terminate, generate_result
    load_catalog, load_session_config, run_adaptive_session
"""

# Schema models
from .schema import (
    Question,
    ResponseRecord,
    SessionState,
    SessionConfig,
    TerminationDecision,
    AdaptiveResult,
)

from .errors import (
    AdaptiveEngineError,
    CatalogError,
    ConfigError,
)

# Ability update
from .ability_engine import (
    initialize_session,
    update_ability_estimate,
    expected_probability,
    time_factor,
    confidence_after,
)

# Question selection
from .adaptive_selector import (
    select_next_question,
    target_difficulty,
)

# Termination
from .termination_policy import (
    should_terminate,
)

# Final report
from .result_synthesizer import (
    generate_result,
    difficulty_band,
    ability_to_level,
    ability_to_percentile,
)

# Catalog & configuration
from .catalog import (
    load_catalog,
    question_from_dict,
    get_questions_for_skill,
    get_available_skills,
    score_answer,
)
from .config import (
    load_session_config,
    validate_config,
    catalog_dir,
)

from .session_runner import (
    run_adaptive_session,
    SessionOutcome,
)


__all__ = [
    # Schema
    "Question",
    "ResponseRecord",
    "SessionState",
    "SessionConfig",
    "TerminationDecision",
    "AdaptiveResult",

    # Errors
    "AdaptiveEngineError",
    "CatalogError",
    "ConfigError",

    # Ability
    "initialize_session",
    "update_ability_estimate",
    "expected_probability",
    "time_factor",
    "confidence_after",

    # Selection
    "select_next_question",
    "target_difficulty",

    # Termination
    "should_terminate",

    # Result
    "generate_result",
    "difficulty_band",
    "ability_to_level",
    "ability_to_percentile",

    # Catalog & config
    "load_catalog",
    "question_from_dict",
    "get_questions_for_skill",
    "get_available_skills",
    "score_answer",
    "load_session_config",
    "validate_config",
    "catalog_dir",

    # Runner
    "run_adaptive_session",
    "SessionOutcome",
]
