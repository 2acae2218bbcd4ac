# adaptive_core/ability_engine.py

import logging
import math
from dataclasses import replace

from .schema import (
    ABILITY_MIN,
    ABILITY_MAX,
    ResponseRecord,
    SessionConfig,
    SessionState,
)

logger = logging.getLogger(__name__)

# Confidence: 0.3 at start, +0.1 per answered question, never above 0.95
CONFIDENCE_START = 0.3
CONFIDENCE_STEP = 0.1
CONFIDENCE_CAP = 0.95

# Latency heuristic: 30s is neutral, factor bounded to [0.8, 1.2]
REFERENCE_RESPONSE_SECONDS = 30.0
TIME_FACTOR_MIN, TIME_FACTOR_MAX = 0.8, 1.2


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def sigmoid_stable(x: float) -> float:
    """
    Numerically stable logistic function
    """
    if x >= 0:
        z = math.exp(-x)
        return 1.0 / (1.0 + z)
    else:
        z = math.exp(x)
        return z / (1.0 + z)


def expected_probability(ability: float, difficulty: float) -> float:
    """P(correct) under a one-parameter logistic model."""
    return sigmoid_stable(ability - difficulty)


def time_factor(response_time: float) -> float:
    """
    Multiplier on the ability delta from response latency.
    Answers faster than 30s amplify the delta (up to 1.2x), slower ones
    dampen it (down to 0.8x). A rough proxy for confidence, not a calibrated
    model.
    """
    if response_time <= 0:
        return TIME_FACTOR_MAX
    return clamp(REFERENCE_RESPONSE_SECONDS / response_time, TIME_FACTOR_MIN, TIME_FACTOR_MAX)


def confidence_after(questions_answered: int) -> float:
    """Confidence once `questions_answered` responses have been recorded."""
    return min(CONFIDENCE_CAP, CONFIDENCE_START + questions_answered * CONFIDENCE_STEP)


def initialize_session(config: SessionConfig) -> SessionState:
    start = clamp(config.starting_difficulty, ABILITY_MIN, ABILITY_MAX)
    return SessionState(
        current_ability=start,
        confidence=CONFIDENCE_START,
        difficulty_history=[start],
    )


def ability_delta(
    ability: float,
    response: ResponseRecord,
    adaptation_rate: float,
) -> float:
    """
    Raw delta before clamping:
        correct:   rate * (1 - p) * credit
        incorrect: -rate * p
    scaled by the latency factor.
    """
    p = expected_probability(ability, response.difficulty)
    if response.is_correct:
        delta = adaptation_rate * (1.0 - p) * response.credit
    else:
        delta = -adaptation_rate * p
    return delta * time_factor(response.response_time)


def update_ability_estimate(
    state: SessionState,
    response: ResponseRecord,
    adaptation_rate: float = 0.5,
) -> SessionState:
    """
    Apply one response to the session and return the updated state.
    The input state is left untouched; histories are copied and appended.
    """
    delta = ability_delta(state.current_ability, response, adaptation_rate)
    new_ability = clamp(state.current_ability + delta, ABILITY_MIN, ABILITY_MAX)

    if response.is_correct:
        consecutive_correct = state.consecutive_correct + 1
        consecutive_incorrect = 0
    else:
        consecutive_correct = 0
        consecutive_incorrect = state.consecutive_incorrect + 1

    logger.debug(
        "question=%s difficulty=%.1f correct=%s ability %.3f -> %.3f",
        response.question_id, response.difficulty, response.is_correct,
        state.current_ability, new_ability,
    )

    return replace(
        state,
        current_ability=new_ability,
        confidence=confidence_after(state.questions_answered + 1),
        questions_answered=state.questions_answered + 1,
        correct_answers=state.correct_answers + (1 if response.is_correct else 0),
        consecutive_correct=consecutive_correct,
        consecutive_incorrect=consecutive_incorrect,
        response_history=[*state.response_history, response],
        difficulty_history=[*state.difficulty_history, new_ability],
    )
