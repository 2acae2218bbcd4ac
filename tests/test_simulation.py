# tests/test_simulation.py

import random

from adaptive_core import load_catalog
from adaptive_core.schema import Question, SessionConfig
from cli.simulate_sessions import make_simulated_responder, run_simulation


def test_simulated_responder_follows_logistic_model():
    rng = random.Random(7)
    respond = make_simulated_responder(10.0, rng)
    easy = Question(id="e", skill="React", difficulty=1.0, question="?", options=("a",), correct_answer="a")

    answers = [respond(easy, None) for _ in range(50)]
    assert sum(a.is_correct for a in answers) >= 48, "a strong candidate should ace easy questions"
    assert all(8.0 <= a.response_time <= 90.0 for a in answers)


def test_run_simulation_summary_is_reproducible():
    catalog = load_catalog()
    config = SessionConfig(skill="React")

    first = run_simulation(catalog, config, n_candidates=25, seed=11, progress=False)
    second = run_simulation(catalog, config, n_candidates=25, seed=11, progress=False)

    assert first == second
    assert sum(first.reasons.values()) == 25
    assert sum(first.level_counts.values()) == 25
    assert 5 <= first.mean_questions <= 10
    assert 0.0 <= first.mean_abs_error <= 9.0
