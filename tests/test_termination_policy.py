# tests/test_termination_policy.py

from adaptive_core.schema import SessionConfig, SessionState
from adaptive_core.termination_policy import (
    REASON_CONFIDENCE,
    REASON_HIGH_PERFORMANCE,
    REASON_LOW_PERFORMANCE,
    REASON_MAX_QUESTIONS,
    should_terminate,
)


def _config(**kw):
    base = dict(skill="React", target_questions=10, min_questions=5, termination_confidence=0.9)
    base.update(kw)
    return SessionConfig(**base)


def _state(answered, confidence=0.5, streak_ok=0, streak_bad=0):
    return SessionState(
        current_ability=5.0,
        confidence=confidence,
        questions_answered=answered,
        consecutive_correct=streak_ok,
        consecutive_incorrect=streak_bad,
    )


def test_never_stops_before_min_questions():
    config = _config(min_questions=5, target_questions=3)
    for answered in range(5):
        decision = should_terminate(_state(answered, confidence=0.95, streak_ok=9), config)
        assert decision.stop is False, f"stopped early at {answered} answers"
        assert decision.reason is None


def test_max_questions_has_priority():
    decision = should_terminate(_state(10, confidence=0.95, streak_ok=6), _config())
    assert decision.stop
    assert decision.reason == REASON_MAX_QUESTIONS


def test_confidence_threshold():
    decision = should_terminate(_state(6, confidence=0.9, streak_ok=5), _config())
    assert decision.stop
    assert decision.reason == REASON_CONFIDENCE


def test_correct_streak_needs_five():
    assert not should_terminate(_state(6, streak_ok=4), _config()).stop

    decision = should_terminate(_state(6, streak_ok=5), _config())
    assert decision.stop
    assert decision.reason == REASON_HIGH_PERFORMANCE


def test_incorrect_streak_needs_four():
    assert not should_terminate(_state(6, streak_bad=3), _config()).stop

    decision = should_terminate(_state(6, streak_bad=4), _config())
    assert decision.stop
    assert decision.reason == REASON_LOW_PERFORMANCE


def test_continue_otherwise():
    decision = should_terminate(_state(6, confidence=0.8, streak_ok=2), _config())
    assert decision.stop is False
    assert decision.reason is None
