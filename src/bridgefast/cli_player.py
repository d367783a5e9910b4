"""
cli_player.py — Play a training module in the terminal
======================================================
Thin Rich front-end over ``SceneEngine``.  Everything the learner does goes
through the engine API; this module only renders scenes and collects input.

Run:
    bridgefast-play professional-boundaries --candidate cand-42
    bridgefast-play --list

Requires nothing beyond the package itself.  With AZURE_OPENAI_ENDPOINT and
AZURE_OPENAI_API_KEY set in .env, retakes use live content variation.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from bridgefast.config import get_settings
from bridgefast.database import SqliteTrainingBackend
from bridgefast.engine import ModuleNotFound, SceneEngine
from bridgefast.models import Scene, SceneType
from bridgefast.module_catalog import list_modules
from bridgefast.narration import Narrator

console = Console()

_TYPE_STYLE = {
    SceneType.NARRATIVE:  "cyan",
    SceneType.CHOICE:     "magenta",
    SceneType.REFLECTION: "yellow",
    SceneType.QUIZ:       "blue",
    SceneType.COMPLETION: "green",
    SceneType.VIDEO:      "white",
}


class ConsoleNarrator(Narrator):
    """Prints narration as dim italic text in place of speech."""

    def __init__(self, out: Console) -> None:
        self._out = out

    def speak(self, text: str) -> None:
        self._out.print(f"[dim italic]🔊 {text}[/dim italic]")

    def cancel(self) -> None:
        pass


# ─── Rendering ───────────────────────────────────────────────────────────────

def _print_catalog() -> None:
    table = Table(title="Interactive training modules", box=box.SIMPLE_HEAVY)
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Difficulty")
    table.add_column("Duration", justify="right")
    table.add_column("Scenes", justify="right")
    for m in list_modules():
        table.add_row(m.slug, m.title, m.difficulty.value, m.duration, str(len(m.scenes)))
    console.print(table)


def _print_header(engine: SceneEngine) -> None:
    module = engine.module
    status = Table.grid(padding=(0, 2))
    for service, badge in get_settings().status_summary().items():
        status.add_row(f"[dim]{service}[/dim]", badge)
    attempt = engine.attempt
    subtitle = (
        f"Retake · attempt {attempt.attempt_number}" if attempt.is_retake else "First attempt"
    )
    console.print(Panel(
        status,
        title=f"[bold magenta]{module.title}[/bold magenta] — {module.subtitle}",
        subtitle=subtitle,
        expand=False,
    ))


def _print_scene(engine: SceneEngine, scene: Scene) -> None:
    snap  = engine.timer_snapshot()
    clock = ""
    if snap is not None:
        clock = f"⏱ {snap.display}" + (" [red](extra time)[/red]" if snap.is_overtime else "")
    style = _TYPE_STYLE.get(scene.type, "white")
    body  = scene.content
    if scene.character:
        body = f"[bold]{scene.character}[/bold]\n\n{body}"
    console.print()
    console.print(Panel(
        body,
        title=f"[{style}]{engine.current_index + 1}/{len(engine.scenes)} · {scene.title}[/{style}]",
        subtitle=f"Score {engine.total_score} · {clock}",
        expand=True,
    ))


# ─── Scene handlers ──────────────────────────────────────────────────────────

def _play_choice(engine: SceneEngine, scene: Scene) -> None:
    if engine.progress_entry(scene.id).completed:
        _print_choice_feedback(engine)
        return
    choices = list(scene.choices or ())
    for i, choice in enumerate(choices, start=1):
        console.print(f"  [magenta]{i}.[/magenta] {choice.text}")
    pick = IntPrompt.ask("Your response", choices=[str(i) for i in range(1, len(choices) + 1)])
    engine.select_choice(choices[pick - 1].id)
    engine.submit_choice()
    _print_choice_feedback(engine)


def _print_choice_feedback(engine: SceneEngine) -> None:
    chosen = engine.choice_feedback()
    if chosen is None:
        return
    colour = "green" if chosen.is_correct else "yellow"
    console.print(Panel(chosen.feedback, title=f"[{colour}]+{chosen.points} points[/{colour}]",
                        border_style=colour, expand=False))


def _play_reflection(engine: SceneEngine, scene: Scene) -> bool:
    """Returns True when the reflection was submitted (engine auto-advanced)."""
    if engine.progress_entry(scene.id).completed:
        console.print("[dim]Reflection already submitted.[/dim]")
        return False
    prompt = scene.reflection
    console.print(f"[yellow]{prompt.prompt}[/yellow] [dim](at least {prompt.min_length} characters)[/dim]")
    while True:
        engine.set_reflection_text(Prompt.ask("   >"))
        if engine.submit_reflection():
            console.print("[bold green]✓ Reflection saved (+10 points).[/bold green]")
            return True
        console.print(
            f"[red]Please write at least {prompt.min_length} characters "
            f"({len(engine.interaction.reflection_text)} so far).[/red]"
        )


def _play_quiz(engine: SceneEngine, scene: Scene) -> None:
    if not engine.progress_entry(scene.id).completed:
        for qi, question in enumerate(scene.quiz or ()):
            console.print(f"\n[bold]Q{qi + 1}. {question.question}[/bold]")
            for oi, option in enumerate(question.options, start=1):
                console.print(f"  [blue]{oi}.[/blue] {option}")
            pick = IntPrompt.ask("Answer", choices=[str(i) for i in range(1, len(question.options) + 1)])
            engine.answer_question(qi, pick - 1)
        engine.submit_quiz()

    table = Table(box=box.SIMPLE, title="Quiz results")
    table.add_column("#", justify="right")
    table.add_column("Result")
    table.add_column("Explanation")
    for review in engine.quiz_review():
        mark = "[green]✓[/green]" if review.correct else "[red]✗[/red]"
        table.add_row(str(review.question_index + 1), mark, review.explanation)
    console.print(table)
    console.print(f"Quiz score: [bold]{engine.progress_entry(scene.id).score}[/bold] / 30")


def _finish(engine: SceneEngine) -> None:
    engine.complete_module()
    summary = engine.summary()
    verdict = "[bold green]PASSED[/bold green]" if summary.passed else "[bold yellow]Not yet passed[/bold yellow]"
    table = Table.grid(padding=(0, 2))
    table.add_row("Score", f"{summary.total_score} / {summary.total_points}")
    table.add_row("Passing score", str(summary.passing_score))
    table.add_row("Result", verdict)
    table.add_row("Scenes completed", f"{summary.completed_scenes} / {summary.total_scenes}")
    if summary.timer is not None:
        table.add_row("Time left", summary.timer.display)
    console.print(Panel(table, title=f"🏁 {summary.module_title}", expand=False))
    failures = engine.trace.failures() if engine.trace else []
    if failures:
        console.print(f"[yellow]⚠ {len(failures)} background save(s) did not complete; "
                      "your local result is shown above.[/yellow]")


# ─── Navigation ──────────────────────────────────────────────────────────────

def _navigate(engine: SceneEngine) -> bool:
    """Ask where to go next.  Returns False when the learner quits."""
    options = ["n", "r", "j", "q"] + ([] if engine.is_first_scene else ["p"])
    action = Prompt.ask("[dim][n]ext  [p]revious  [r]eplay  [j]ump  [q]uit[/dim]",
                        choices=options, default="n", show_choices=False)
    if action == "q":
        return False
    if action == "p":
        engine.go_to_previous()
    elif action == "r":
        engine.speak_current()
    elif action == "j":
        target = IntPrompt.ask("Scene number")
        if not engine.navigate_to(target - 1):
            console.print("[red]That scene is still locked.[/red]")
    else:
        engine.go_to_next()
    return True


def play(engine: SceneEngine) -> None:
    _print_header(engine)
    while True:
        scene = engine.current_scene
        _print_scene(engine, scene)

        if scene.type == SceneType.COMPLETION:
            _finish(engine)
            return
        if scene.type == SceneType.CHOICE:
            _play_choice(engine, scene)
        elif scene.type == SceneType.QUIZ:
            _play_quiz(engine, scene)
        elif scene.type == SceneType.REFLECTION and _play_reflection(engine, scene):
            continue

        if not _navigate(engine):
            console.print("[dim]Leaving module. Progress so far has been saved.[/dim]")
            return


# ─── Entry point ─────────────────────────────────────────────────────────────

def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bridgefast-play",
                                     description="Play an interactive training module.")
    parser.add_argument("module", nargs="?", help="module id or slug")
    parser.add_argument("--candidate", default="local-candidate", help="candidate id")
    parser.add_argument("--db", default=None, help="SQLite file (default: BRIDGEFAST_DB_PATH)")
    parser.add_argument("--list", action="store_true", help="list modules and exit")
    parser.add_argument("--mute", action="store_true", help="disable narration")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.player.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )
    args = _parse_args(argv)

    if args.list:
        _print_catalog()
        return 0

    module_ref = args.module
    if not module_ref:
        _print_catalog()
        module_ref = Prompt.ask("Module", choices=[m.slug for m in list_modules()])

    engine = SceneEngine(
        backend=SqliteTrainingBackend(args.db or settings.database.path),
        narrator=ConsoleNarrator(console),
        settings=settings,
    )
    if args.mute:
        engine.narration.muted = True

    try:
        engine.load(module_ref, args.candidate)
    except ModuleNotFound as exc:
        console.print(f"[bold red]✗ {exc}[/bold red]")
        return 1

    try:
        play(engine)
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted.[/dim]")
    finally:
        engine.leave()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
