# adaptive_core/result_synthesizer.py

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from .schema import (
    ADVANCED,
    BEGINNER,
    MID_LEVEL,
    AdaptiveResult,
    SessionState,
)


# ============================
# Difficulty bands
# ============================

BASICS = "basics"              # difficulty <= 3
INTERMEDIATE = "intermediate"  # 3 < difficulty <= 6
ADVANCED_BAND = "advanced"     # difficulty > 6
BANDS = (BASICS, INTERMEDIATE, ADVANCED_BAND)

STRENGTH_RATE = 0.7
WEAKNESS_RATE = 0.4
WEAKNESS_MIN_RESPONSES = 2

FALLBACK_STRENGTH = "Consistent performance across levels"
FALLBACK_WEAKNESS = "Keep practicing for mastery"


def _round_half_up(x: float, ndigits: int = 0) -> float:
    factor = 10 ** ndigits
    return math.floor(x * factor + 0.5) / factor


def difficulty_band(difficulty: float) -> str:
    if difficulty <= 3:
        return BASICS
    if difficulty <= 6:
        return INTERMEDIATE
    return ADVANCED_BAND


def ability_to_level(ability: float) -> str:
    if ability <= 3:
        return BEGINNER
    if ability <= 7:
        return MID_LEVEL
    return ADVANCED


def ability_to_percentile(ability: float) -> int:
    """
    Fixed sigmoid centred on ability 5. A presentation transform only:
    there is no population behind it.
    """
    percentile = 100.0 / (1.0 + math.exp(-(ability - 5.0) * 0.8))
    return int(_round_half_up(percentile))


def band_stats(state: SessionState) -> Dict[str, Tuple[int, int]]:
    """
    {band: (correct, total)} using the difficulty recorded at answer time.
    Bands without responses are omitted.
    """
    stats: Dict[str, List[int]] = {}
    for r in state.response_history:
        counts = stats.setdefault(difficulty_band(r.difficulty), [0, 0])
        counts[1] += 1
        if r.is_correct:
            counts[0] += 1
    return {b: (stats[b][0], stats[b][1]) for b in BANDS if b in stats}


def strengths_and_weaknesses(state: SessionState, skill: str) -> Tuple[List[str], List[str]]:
    strengths: List[str] = []
    weaknesses: List[str] = []

    for band, (correct, total) in band_stats(state).items():
        rate = correct / total
        if rate >= STRENGTH_RATE:
            strengths.append(f"Strong {band} {skill} knowledge")
        elif rate < WEAKNESS_RATE and total >= WEAKNESS_MIN_RESPONSES:
            weaknesses.append(f"{band.capitalize()} {skill} concepts need review")

    return strengths, weaknesses


def generate_result(state: SessionState, skill: str) -> AdaptiveResult:
    """
    Reduce a finished session to the candidate-facing report.
    Safe on an empty session (0% accuracy, 0s average time).
    """
    answered = state.questions_answered
    accuracy = state.correct_answers / answered * 100 if answered > 0 else 0.0

    history = state.response_history
    avg_time = sum(r.response_time for r in history) / len(history) if history else 0.0

    strengths, weaknesses = strengths_and_weaknesses(state, skill)
    level = ability_to_level(state.current_ability)

    return AdaptiveResult(
        estimated_ability=_round_half_up(state.current_ability, 1),
        ability_level=level,
        confidence=_round_half_up(state.confidence, 2),
        percentile_rank=ability_to_percentile(state.current_ability),
        questions_answered=answered,
        accuracy=int(_round_half_up(accuracy)),
        average_response_time=_round_half_up(avg_time, 1),
        strength_areas=strengths or [FALLBACK_STRENGTH],
        weakness_areas=weaknesses or [FALLBACK_WEAKNESS],
        recommended_level=level,
    )
