"""Command-line interface for doc-filer.

Provides ``categories``, ``evaluate``, and ``classify`` commands with rich
terminal output using the ``click`` and ``rich`` libraries.

Usage::

    doc-filer categories ~/papers
    doc-filer evaluate --seed 7 ~/papers
    doc-filer classify ~/papers new-paper.pdf
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import evaluator
from .classifier import classify as classify_document
from .classifier import select_best
from .config import Settings, load_settings, parse_extensions
from .corpus import discover
from .errors import FilerError
from .models import EvaluationReport
from .trainer import train

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(exc: Exception) -> None:
    console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    sys.exit(1)


def _extensions(settings: Settings, ext: tuple[str, ...]) -> tuple[str, ...]:
    if ext:
        return parse_extensions(",".join(ext))
    return settings.extensions


def _accuracy_style(accuracy: float, total: int) -> str:
    if total == 0:
        return "dim"
    if accuracy >= 80:
        return "bold green"
    if accuracy >= 50:
        return "bold yellow"
    return "bold red"


_seed_option = click.option(
    "--seed", type=int, default=None,
    help="Seed for the train/test split (default: $DOC_FILER_SEED or random).",
)
_ext_option = click.option(
    "--ext", "-e", multiple=True,
    help="Document extension to include; repeatable (default: $DOC_FILER_EXTENSIONS or .pdf).",
)
_output_option = click.option(
    "--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
    help="Output format.",
)


@click.group()
@click.version_option(package_name="doc-filer")
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """📂 doc-filer: file documents into categories with Naive Bayes.

    Each subdirectory of ROOT holding documents is a category. Half of every
    category trains the model and the other half is held out for testing.
    """
    try:
        settings = load_settings()
    except FilerError as e:
        _fail(e)
    _setup_logging("INFO" if verbose else settings.log_level)
    ctx.obj = settings


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False, path_type=Path))
@_ext_option
@click.pass_obj
def categories(settings: Settings, root: Path, ext: tuple[str, ...]) -> None:
    """List the categories found under ROOT.

    Example: doc-filer categories ~/papers
    """
    try:
        found = discover(root, _extensions(settings, ext))
    except (FilerError, OSError) as e:
        _fail(e)

    if not found:
        console.print(f"[yellow]No categories found under {root}[/]")
        return

    table = Table(title=f"Categories — {root}")
    table.add_column("Category", style="cyan")
    table.add_column("Documents", justify="right")
    for name, documents in found:
        table.add_row(name, str(len(documents)))
    console.print(table)


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False, path_type=Path))
@_seed_option
@_ext_option
@_output_option
@click.pass_obj
def evaluate(
    settings: Settings,
    root: Path,
    seed: Optional[int],
    ext: tuple[str, ...],
    output: str,
) -> None:
    """Train on half of each category and report accuracy on the rest.

    Example: doc-filer evaluate --seed 7 ~/papers
    """
    seed = seed if seed is not None else settings.seed

    with console.status("[bold blue]Training and testing...", spinner="dots"):
        try:
            result = train(discover(root, _extensions(settings, ext)), seed=seed)
            report = evaluator.evaluate(result)
        except (FilerError, OSError) as e:
            _fail(e)

    if output == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _render_report(report, root)


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_seed_option
@_ext_option
@_output_option
@click.pass_obj
def classify(
    settings: Settings,
    root: Path,
    file: Path,
    seed: Optional[int],
    ext: tuple[str, ...],
    output: str,
) -> None:
    """Train on ROOT and score FILE against every category.

    Example: doc-filer classify ~/papers new-paper.pdf
    """
    seed = seed if seed is not None else settings.seed

    with console.status("[bold blue]Classifying document...", spinner="dots"):
        try:
            result = train(discover(root, _extensions(settings, ext)), seed=seed)
            scores = classify_document(result, file)
            best = select_best(scores)
        except (FilerError, OSError) as e:
            _fail(e)

    if output == "json":
        click.echo(json.dumps({
            "document": str(file),
            "predicted": best,
            "scores": scores,
        }, indent=2))
        return

    table = Table(title=f"Scores — {file.name}")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    for name, score in sorted(scores.items(), key=lambda x: x[1], reverse=True):
        style = "bold green" if name == best else ""
        table.add_row(name, f"[{style}]{score:.4f}[/]" if style else f"{score:.4f}")
    console.print(table)
    console.print(Panel(f"[bold]{best}[/]", title="Best category", border_style="green"))


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_report(report: EvaluationReport, root: Path) -> None:
    """Render an EvaluationReport as a rich table."""
    table = Table(title=f"Evaluation — {root}", show_footer=True)
    table.add_column("Category", style="cyan", footer="Overall")
    table.add_column("Correct", justify="right", footer=str(report.correct))
    table.add_column("Incorrect", justify="right", footer=str(report.incorrect))
    table.add_column("Accuracy", justify="right", footer=f"{report.accuracy:.2f}%")

    for r in report.categories:
        style = _accuracy_style(r.accuracy, r.total)
        table.add_row(
            r.category,
            str(r.correct),
            str(r.incorrect),
            f"[{style}]{r.accuracy:.2f}%[/]",
        )

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    main()
