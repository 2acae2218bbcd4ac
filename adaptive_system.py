import sys
import pathlib
from dotenv import load_dotenv
from rich.console import Console

ROOT = pathlib.Path(__file__).parent
ENV_FILE = ROOT / ".env"

load_dotenv(ENV_FILE)

console = Console()


def main() -> int:
    console.print("\n[bold cyan]ADAPTIVE ASSESSMENT ENGINE - CLI[/bold cyan]")
    console.print("-" * 40)
    console.print("1. Take an adaptive assessment")
    console.print("2. Simulate candidates (calibration check)")
    console.print("3. List catalog skills")
    console.print("0. Exit")
    console.print("-" * 40)
    choice = input("Choose (0-3): ").strip()
    if choice == "1":
        from cli.run_adaptive_assessment import run_adaptive_demo
        return run_adaptive_demo()
    elif choice == "2":
        from cli.simulate_sessions import run_simulation_cli
        return run_simulation_cli()
    elif choice == "3":
        from adaptive_core import CatalogError, catalog_dir, get_available_skills, get_questions_for_skill, load_catalog
        try:
            catalog = load_catalog(catalog_dir())
        except CatalogError as e:
            console.print(f"[red]{e}[/red]")
            return 1
        for skill in get_available_skills(catalog):
            difficulties = sorted({q.difficulty for q in get_questions_for_skill(catalog, skill)})
            console.print(f"  [cyan]{skill}[/cyan]: {len(catalog[skill])} questions, difficulties {difficulties}")
        return 0
    elif choice == "0":
        console.print("[green]Bye![/green]")
        return 0
    else:
        console.print("[yellow]Invalid choice, enter 0-3.[/yellow]")
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n[red]Stopped.[/red]")
