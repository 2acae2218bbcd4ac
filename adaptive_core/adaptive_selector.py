# adaptive_core/adaptive_selector.py

from __future__ import annotations

import logging
from typing import Collection, Mapping, Optional, Sequence

from .schema import ABILITY_MIN, ABILITY_MAX, Question, SessionState

logger = logging.getLogger(__name__)

# Aim slightly above the current estimate so the test stays informative
CHALLENGE_OFFSET = 0.5


# ============================
# Question selection
# ============================

def target_difficulty(ability: float) -> float:
    return max(ABILITY_MIN, min(ABILITY_MAX, ability + CHALLENGE_OFFSET))


def select_next_question(
    skill: str,
    state: SessionState,
    used_ids: Collection[str],
    catalog: Mapping[str, Sequence[Question]],
) -> Optional[Question]:
    """
    Pick the unused question whose difficulty is closest to
    current_ability + CHALLENGE_OFFSET.

    Priority:
        1) Question not in used_ids
        2) Smallest |difficulty - target|
        3) Catalog order on ties (first match wins)

    Returns None when the skill has no unused question left; the caller
    treats that as the end of the session.
    """
    target = target_difficulty(state.current_ability)

    best_question: Optional[Question] = None
    best_gap = float("inf")

    for question in catalog.get(skill, ()):
        if question.id in used_ids:
            continue

        gap = abs(question.difficulty - target)
        if gap < best_gap:
            best_gap = gap
            best_question = question

    if best_question is None:
        logger.debug("No unused question left for skill=%s (%d used)", skill, len(used_ids))
        return None

    logger.debug(
        "Selected %s difficulty=%.1f target=%.2f ability=%.2f",
        best_question.id, best_question.difficulty, target, state.current_ability,
    )
    return best_question
