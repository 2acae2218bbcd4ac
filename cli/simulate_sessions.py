"""
Monte-Carlo replay of the adaptive engine.

Simulated candidates with a known true ability (1-10) answer under the same
logistic model the engine assumes, with random latencies. Useful to check
how far the final estimate lands from the truth and why sessions stop,
before changing thresholds in .env.
"""

import os
import sys
import math
import random
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence
from dotenv import load_dotenv
from tqdm import tqdm
from rich.console import Console
from rich.table import Table

from adaptive_core import (
    AdaptiveEngineError,
    Question,
    ResponseRecord,
    SessionConfig,
    catalog_dir,
    expected_probability,
    get_available_skills,
    load_catalog,
    load_session_config,
    run_adaptive_session,
)

env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env")
load_dotenv(dotenv_path=env_path)
logging.basicConfig(level=logging.WARNING, format="[%(asctime)s] %(levelname)s - %(message)s")

console = Console()

LATENCY_RANGE = (8.0, 90.0)  # seconds


@dataclass
class SimulationSummary:
    skill: str
    n_candidates: int
    mean_abs_error: float = 0.0
    mean_questions: float = 0.0
    reasons: Dict[str, int] = field(default_factory=dict)
    level_counts: Dict[str, int] = field(default_factory=dict)


def make_simulated_responder(true_ability: float, rng: random.Random):
    def respond(question: Question, state) -> ResponseRecord:
        p = expected_probability(true_ability, question.difficulty)
        return ResponseRecord(
            question_id=question.id,
            difficulty=question.difficulty,
            is_correct=rng.random() < p,
            response_time=rng.uniform(*LATENCY_RANGE),
        )
    return respond


def run_simulation(
    catalog: Mapping[str, Sequence[Question]],
    config: SessionConfig,
    n_candidates: int = 200,
    seed: int = 2025,
    progress: bool = True,
) -> SimulationSummary:
    rng = random.Random(seed)
    errors: List[float] = []
    lengths: List[int] = []
    reasons: Counter = Counter()
    levels: Counter = Counter()

    for _ in tqdm(range(n_candidates), desc=f"Simulating {config.skill}", ncols=80, disable=not progress):
        true_ability = rng.uniform(1.0, 10.0)
        outcome = run_adaptive_session(catalog, config, make_simulated_responder(true_ability, rng))
        errors.append(abs(outcome.state.current_ability - true_ability))
        lengths.append(outcome.state.questions_answered)
        reasons[outcome.reason] += 1
        levels[outcome.result.ability_level] += 1

    summary = SimulationSummary(skill=config.skill, n_candidates=n_candidates)
    if n_candidates > 0:
        summary.mean_abs_error = math.fsum(errors) / n_candidates
        summary.mean_questions = sum(lengths) / n_candidates
    summary.reasons = dict(reasons)
    summary.level_counts = dict(levels)
    return summary


def print_summary(summary: SimulationSummary) -> None:
    table = Table(title=f"Simulation: {summary.skill} ({summary.n_candidates} candidates)")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Mean |ability - truth|", f"{summary.mean_abs_error:.2f}")
    table.add_row("Mean questions", f"{summary.mean_questions:.1f}")
    for reason, count in sorted(summary.reasons.items(), key=lambda x: -x[1]):
        table.add_row(f"Stop: {reason}", str(count))
    for level, count in sorted(summary.level_counts.items()):
        table.add_row(f"Level: {level}", str(count))
    console.print(table)


def run_simulation_cli() -> int:
    try:
        catalog = load_catalog(catalog_dir())
    except AdaptiveEngineError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    skills = get_available_skills(catalog)
    if not skills:
        console.print("[red]No questions available.[/red]")
        return 1

    raw = input(f"Skill to simulate ({', '.join(skills)}; Enter = all): ").strip()
    selected = [raw] if raw in skills else skills
    try:
        n = int(input("Number of simulated candidates (Enter = 200): ").strip() or 200)
    except ValueError:
        n = 200

    for skill in selected:
        try:
            config = load_session_config(skill)
        except AdaptiveEngineError as e:
            console.print(f"[red]Invalid configuration: {e}[/red]")
            return 1
        print_summary(run_simulation(catalog, config, n_candidates=n))
    return 0


if __name__ == "__main__":
    sys.exit(run_simulation_cli())
