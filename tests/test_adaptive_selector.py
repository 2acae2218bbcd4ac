# tests/test_adaptive_selector.py

from adaptive_core.adaptive_selector import select_next_question, target_difficulty
from adaptive_core.schema import Question, SessionState


def _q(qid, difficulty, skill="React"):
    return Question(
        id=qid,
        skill=skill,
        difficulty=difficulty,
        question=f"Question {qid}",
        options=("a", "b"),
        correct_answer="a",
    )


CATALOG = {
    "React": (_q("r1", 1), _q("r3", 3), _q("r5", 5), _q("r6", 6), _q("r8", 8), _q("r10", 10)),
    "Python": (_q("p5", 5, "Python"),),
}


def test_target_difficulty_offset_and_clamp():
    assert target_difficulty(5.0) == 5.5
    assert target_difficulty(9.8) == 10.0
    assert target_difficulty(0.0) == 1.0


def test_selects_closest_to_ability_plus_offset():
    state = SessionState(current_ability=7.4)  # target 7.9
    q = select_next_question("React", state, set(), CATALOG)
    assert q.id == "r8"


def test_ties_go_to_catalog_order():
    # target 5.5: r5 and r6 are both 0.5 away, r5 comes first
    state = SessionState(current_ability=5.0)
    q = select_next_question("React", state, set(), CATALOG)
    assert q.id == "r5"


def test_used_ids_are_never_returned():
    state = SessionState(current_ability=5.0)
    used = {"r5", "r6"}
    q = select_next_question("React", state, used, CATALOG)
    assert q is not None
    assert q.id not in used
    assert q.id == "r3", "r3 (2.5 away) beats r8 (2.5 away) on catalog order"


def test_selection_is_deterministic():
    state = SessionState(current_ability=3.2)
    picks = {select_next_question("React", state, {"r3"}, CATALOG).id for _ in range(20)}
    assert len(picks) == 1


def test_unknown_skill_returns_none():
    assert select_next_question("Go", SessionState(current_ability=5.0), set(), CATALOG) is None


def test_exhaustion_returns_none():
    state = SessionState(current_ability=5.0)
    q = select_next_question("Python", state, set(), CATALOG)
    assert q.id == "p5"

    assert select_next_question("Python", state, {q.id}, CATALOG) is None


def test_selector_does_not_modify_catalog():
    before = [q.difficulty for q in CATALOG["React"]]
    select_next_question("React", SessionState(current_ability=2.0), set(), CATALOG)
    assert [q.difficulty for q in CATALOG["React"]] == before
