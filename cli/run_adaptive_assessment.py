import os
import sys
import json
import time
import logging
from typing import Any, Dict, Optional
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from adaptive_core import (
    AdaptiveEngineError,
    Question,
    ResponseRecord,
    SessionState,
    catalog_dir,
    get_available_skills,
    get_questions_for_skill,
    load_catalog,
    load_session_config,
    run_adaptive_session,
    score_answer,
)
from adaptive_core.schema import MULTIPLE_CHOICE

env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env")
load_dotenv(dotenv_path=env_path)
logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")

console = Console()


def ask_multiple_choice(view: Dict[str, Any]) -> Optional[str]:
    options = view["options"]
    for i, option in enumerate(options, 1):
        console.print(f"  [cyan]{i}.[/cyan] {option}")
    while True:
        raw = input(f"Choose an answer (1-{len(options)}, h = hint, q = quit): ").strip().lower()
        if raw == "q":
            return None
        if raw == "h":
            for hint in view["hints"] or ["No hint for this question."]:
                console.print(f"[yellow]Hint:[/yellow] {hint}")
            continue
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        console.print("[yellow]Invalid choice.[/yellow]")


def ask_self_graded(question: Question) -> Optional[float]:
    """Open-ended/code answers have no key: show the reference and let the candidate grade it."""
    answer = input("Your answer (q = quit): ").strip()
    if answer.lower() == "q":
        return None
    console.print(f"\n[magenta]Reference answer:[/magenta] {question.explanation}")
    while True:
        raw = input("How much of the reference did you cover? (0-100%): ").strip().rstrip("%")
        try:
            value = float(raw)
        except ValueError:
            console.print("[yellow]Enter a number between 0 and 100.[/yellow]")
            continue
        if 0 <= value <= 100:
            return value / 100.0
        console.print("[yellow]Enter a number between 0 and 100.[/yellow]")


def terminal_responder(question: Question, state: SessionState) -> Optional[ResponseRecord]:
    step = state.questions_answered + 1
    view = question.public_view()
    console.print(
        f"\n[bold blue]Question {step}[/bold blue] "
        f"(difficulty {view['difficulty']:g}, {view['points']} pts, {view['time_limit']}s)"
    )
    console.print(view["question"])

    started = time.monotonic()
    if question.type == MULTIPLE_CHOICE:
        answer = ask_multiple_choice(view)
        if answer is None:
            return None
        is_correct = bool(score_answer(question, answer))
        credit = None
        console.print("[green]Correct![/green]" if is_correct else "[red]Incorrect.[/red]")
        if question.explanation:
            console.print(f"[magenta]Explanation:[/magenta] {question.explanation}")
    else:
        credit = ask_self_graded(question)
        if credit is None:
            return None
        is_correct = credit >= 0.5
    elapsed = time.monotonic() - started

    return ResponseRecord(
        question_id=question.id,
        difficulty=question.difficulty,
        is_correct=is_correct,
        response_time=elapsed,
        partial_credit=credit,
    )


def choose_skill(catalog) -> Optional[str]:
    skills = get_available_skills(catalog)
    console.print("\n[magenta]Available skills:[/magenta]")
    for i, sk in enumerate(skills, 1):
        console.print(f"  [cyan]{i}.[/cyan] {sk} ({len(get_questions_for_skill(catalog, sk))} questions)")

    raw = input("\nChoose a skill (number or name): ").strip()
    if raw.isdigit() and 1 <= int(raw) <= len(skills):
        return skills[int(raw) - 1]
    if raw in skills:
        return raw
    console.print("[yellow]Unknown skill.[/yellow]")
    return None


def print_result(outcome) -> None:
    result = outcome.result
    table = Table(title=f"Adaptive assessment result ({outcome.reason})")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Estimated ability", f"{result.estimated_ability} / 10")
    table.add_row("Level", result.ability_level)
    table.add_row("Percentile", str(result.percentile_rank))
    table.add_row("Confidence", f"{result.confidence:.2f}")
    table.add_row("Questions answered", str(result.questions_answered))
    table.add_row("Accuracy", f"{result.accuracy}%")
    table.add_row("Avg. response time", f"{result.average_response_time}s")
    table.add_row("Recommended level", result.recommended_level)
    console.print(table)

    console.print("[green]Strengths:[/green]")
    for s in result.strength_areas:
        console.print(f"  + {s}")
    console.print("[red]To work on:[/red]")
    for w in result.weakness_areas:
        console.print(f"  - {w}")


def save_result(outcome, skill: str, out_dir: str = "results") -> str:
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f"adaptive_result_{skill}.json")
    payload = {
        "skill": skill,
        "reason": outcome.reason,
        "questions": outcome.used_ids,
        "ability_trace": outcome.state.difficulty_history,
        "result": outcome.result.to_dict(),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return path


def run_adaptive_demo() -> int:
    try:
        catalog = load_catalog(catalog_dir())
    except AdaptiveEngineError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    if not catalog:
        console.print("[red]No questions available.[/red]")
        return 1

    skill = choose_skill(catalog)
    if not skill:
        return 1

    try:
        config = load_session_config(skill)
    except AdaptiveEngineError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return 1

    console.print(
        f"\n[bold cyan]ADAPTIVE ASSESSMENT: {skill}[/bold cyan] "
        f"(up to {config.target_questions} questions, {config.max_time_minutes:g} min)\n"
    )
    outcome = run_adaptive_session(catalog, config, terminal_responder, clock=time.monotonic)

    console.print(f"\n[bold cyan]ASSESSMENT FINISHED[/bold cyan]: {outcome.reason}")
    print_result(outcome)

    if outcome.state.questions_answered:
        path = save_result(outcome, skill)
        console.print(f"[green]Result saved to {path}[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(run_adaptive_demo())
