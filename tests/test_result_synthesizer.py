# tests/test_result_synthesizer.py

import pytest

from adaptive_core.result_synthesizer import (
    FALLBACK_STRENGTH,
    FALLBACK_WEAKNESS,
    ability_to_level,
    ability_to_percentile,
    band_stats,
    difficulty_band,
    generate_result,
)
from adaptive_core.schema import ResponseRecord, SessionState


def _state(responses, ability=5.0, confidence=0.8):
    return SessionState(
        current_ability=ability,
        confidence=confidence,
        questions_answered=len(responses),
        correct_answers=sum(1 for r in responses if r.is_correct),
        response_history=list(responses),
    )


def _r(difficulty, correct, seconds=30.0):
    return ResponseRecord(
        question_id=f"q{difficulty}",
        difficulty=difficulty,
        is_correct=correct,
        response_time=seconds,
    )


def test_band_classification():
    assert difficulty_band(3) == "basics"
    assert difficulty_band(1) == "basics"
    assert difficulty_band(4) == "intermediate"
    assert difficulty_band(6) == "intermediate"
    assert difficulty_band(7) == "advanced"
    assert difficulty_band(10) == "advanced"


def test_ability_to_level():
    assert ability_to_level(1.0) == "Beginner"
    assert ability_to_level(3.0) == "Beginner"
    assert ability_to_level(3.1) == "Mid-Level"
    assert ability_to_level(7.0) == "Mid-Level"
    assert ability_to_level(7.01) == "Advanced"


def test_percentile_midpoint_and_shape():
    assert ability_to_percentile(5) == 50
    assert ability_to_percentile(1) < ability_to_percentile(5) < ability_to_percentile(10)
    assert 0 <= ability_to_percentile(1) and ability_to_percentile(10) <= 100


def test_zero_questions_does_not_divide_by_zero():
    result = generate_result(_state([]), "React")

    assert result.accuracy == 0
    assert result.average_response_time == 0.0
    assert result.questions_answered == 0
    assert result.strength_areas == [FALLBACK_STRENGTH]
    assert result.weakness_areas == [FALLBACK_WEAKNESS]


def test_strengths_and_weaknesses_by_band():
    responses = [
        _r(2, True), _r(3, True), _r(1, True),    # basics 3/3 -> strength
        _r(5, True), _r(6, False),                 # intermediate 1/2 -> neither
        _r(8, False), _r(9, False), _r(7, True),   # advanced 1/3 -> weakness
    ]
    result = generate_result(_state(responses), "React")

    assert result.strength_areas == ["Strong basics React knowledge"]
    assert result.weakness_areas == ["Advanced React concepts need review"]


def test_single_wrong_answer_is_not_a_weakness():
    result = generate_result(_state([_r(8, False)]), "Python")
    assert result.weakness_areas == [FALLBACK_WEAKNESS]
    assert result.strength_areas == [FALLBACK_STRENGTH]


def test_bands_use_answer_time_difficulty():
    stats = band_stats(_state([_r(2, True), _r(8, False)], ability=9.5))
    assert stats == {"basics": (1, 1), "advanced": (0, 1)}


def test_result_fields_and_rounding():
    responses = [_r(5, True, 10.0), _r(6, True, 20.0), _r(7, False, 35.0)]
    result = generate_result(_state(responses, ability=6.04, confidence=0.6000000001), "React")

    assert result.estimated_ability == pytest.approx(6.0)
    assert result.confidence == pytest.approx(0.6)
    assert result.accuracy == 67
    assert result.average_response_time == pytest.approx(21.7)
    assert result.ability_level == "Mid-Level"
    assert result.recommended_level == result.ability_level
    assert result.percentile_rank == ability_to_percentile(6.04)
    assert result.to_dict()["questions_answered"] == 3
