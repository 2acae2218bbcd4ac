# adaptive_core/termination_policy.py

from __future__ import annotations

from .schema import SessionConfig, SessionState, TerminationDecision


# Streak thresholds: a losing streak ends the test sooner than a winning one
CORRECT_STREAK_LIMIT = 5
INCORRECT_STREAK_LIMIT = 4

REASON_MAX_QUESTIONS = "maximum questions reached"
REASON_CONFIDENCE = "confidence threshold reached"
REASON_HIGH_PERFORMANCE = "consistent high performance"
REASON_LOW_PERFORMANCE = "consistent low performance"

CONTINUE = TerminationDecision(stop=False)


def should_terminate(state: SessionState, config: SessionConfig) -> TerminationDecision:
    """
    Decide whether to stop after the latest response has been applied.

    Nothing stops a session before config.min_questions answers. After that
    the first matching rule wins:
        1) question count reached target_questions
        2) confidence reached termination_confidence
        3) CORRECT_STREAK_LIMIT correct in a row
        4) INCORRECT_STREAK_LIMIT incorrect in a row
    """
    if state.questions_answered < config.min_questions:
        return CONTINUE

    if state.questions_answered >= config.target_questions:
        return TerminationDecision(True, REASON_MAX_QUESTIONS)

    if state.confidence >= config.termination_confidence:
        return TerminationDecision(True, REASON_CONFIDENCE)

    if state.consecutive_correct >= CORRECT_STREAK_LIMIT:
        return TerminationDecision(True, REASON_HIGH_PERFORMANCE)

    if state.consecutive_incorrect >= INCORRECT_STREAK_LIMIT:
        return TerminationDecision(True, REASON_LOW_PERFORMANCE)

    return CONTINUE
