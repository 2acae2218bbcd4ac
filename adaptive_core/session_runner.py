# adaptive_core/session_runner.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Sequence

from .ability_engine import initialize_session, update_ability_estimate
from .adaptive_selector import select_next_question
from .result_synthesizer import generate_result
from .schema import AdaptiveResult, Question, ResponseRecord, SessionConfig, SessionState
from .termination_policy import should_terminate

logger = logging.getLogger(__name__)

REASON_EXHAUSTED = "question bank exhausted"
REASON_QUIT = "candidate quit"
REASON_TIME_LIMIT = "time limit reached"

# respond(question, state) -> ResponseRecord, or None to abandon the session
Responder = Callable[[Question, SessionState], Optional[ResponseRecord]]


@dataclass
class SessionOutcome:
    state: SessionState
    result: AdaptiveResult
    reason: str
    used_ids: List[str] = field(default_factory=list)


def run_adaptive_session(
    catalog: Mapping[str, Sequence[Question]],
    config: SessionConfig,
    respond: Responder,
    clock: Optional[Callable[[], float]] = None,
) -> SessionOutcome:
    """
    Drive one session: select -> respond -> update -> check termination,
    until a stop rule fires, the bank runs out, the candidate quits or the
    wall-clock budget (only when `clock` is given, in seconds) is spent.
    """
    state = initialize_session(config)
    used_ids: List[str] = []
    started = clock() if clock else None
    reason = None

    while reason is None:
        if clock and (clock() - started) >= config.max_time_minutes * 60:
            reason = REASON_TIME_LIMIT
            break

        question = select_next_question(config.skill, state, set(used_ids), catalog)
        if question is None:
            reason = REASON_EXHAUSTED
            break

        response = respond(question, state)
        if response is None:
            reason = REASON_QUIT
            break

        used_ids.append(question.id)
        state = update_ability_estimate(state, response, config.adaptation_rate)

        decision = should_terminate(state, config)
        if decision.stop:
            reason = decision.reason

    logger.info(
        f"Session for {config.skill} ended after {state.questions_answered} questions: {reason} "
        f"(ability={state.current_ability:.2f})"
    )
    return SessionOutcome(
        state=state,
        result=generate_result(state, config.skill),
        reason=reason,
        used_ids=used_ids,
    )
