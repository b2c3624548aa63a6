"""CLI interface for repo-evaluator."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from repo_evaluator.errors import RepoEvaluatorError
from repo_evaluator.models.model_eval import DEFAULT_POLICY, Dimension, RubricPolicy, load_policy
from repo_evaluator.models.model_result import EvaluationResult, Priority
from repo_evaluator.pipeline import evaluate_snapshot_file, run_evaluation

app = typer.Typer(
    name="repo-eval",
    help="repo-evaluator - Score GitHub repositories and get an improvement roadmap",
)

console = Console()

PRIORITY_COLORS = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _get_score_color(score: float) -> str:
    """Get color for score display."""
    if score >= 70:
        return "green"
    elif score >= 50:
        return "yellow"
    else:
        return "red"


def _load_policy_option(policy_file: Path | None) -> RubricPolicy:
    """Load the policy given on the command line, or the canonical one."""
    if policy_file is None:
        return DEFAULT_POLICY
    try:
        return load_policy(policy_file)
    except RepoEvaluatorError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _print_result(result: EvaluationResult, as_json: bool) -> None:
    """Render an evaluation as JSON or as rich tables."""
    if as_json:
        typer.echo(json.dumps(result.to_payload(), indent=2))
        return

    metadata = result.metadata
    color = _get_score_color(result.overall)
    console.print(f"\n[bold]{metadata.name}[/bold] ({metadata.url})")
    console.print(
        f"Overall score: [{color}]{result.overall}/100[/{color}] "
        f"- Level: [bold]{result.level.value}[/bold]\n"
    )

    table = Table(title="Dimension Scores")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", justify="right")
    for dimension, score in result.scores.items():
        score_color = _get_score_color(score)
        table.add_row(dimension.value, f"[{score_color}]{score}[/{score_color}]")
    console.print(table)

    console.print(f"\n[bold]Summary[/bold]\n{result.summary}\n")

    roadmap = Table(title="Improvement Roadmap")
    roadmap.add_column("#", justify="right", style="dim")
    roadmap.add_column("Priority")
    roadmap.add_column("Title", style="bold")
    roadmap.add_column("Description", style="dim")
    for index, item in enumerate(result.roadmap, 1):
        priority_color = PRIORITY_COLORS[item.priority]
        roadmap.add_row(
            str(index),
            f"[{priority_color}]{item.priority.value}[/{priority_color}]",
            item.title,
            item.description,
        )
    console.print(roadmap)


@app.command()
def analyze(
    url: str = typer.Argument(..., help="GitHub repository URL"),
    token: str = typer.Option(
        None, "--token", "-t", envvar="GITHUB_TOKEN", help="GitHub API token"
    ),
    policy_file: Path = typer.Option(None, "--policy", help="Rubric policy JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    """Fetch a GitHub repository and evaluate it."""
    _configure_logging(verbose)
    policy = _load_policy_option(policy_file)

    try:
        result = run_evaluation(url, token=token, policy=policy)
    except RepoEvaluatorError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _print_result(result, as_json)


@app.command()
def evaluate(
    snapshot_file: Path = typer.Argument(..., help="Snapshot JSON file"),
    policy_file: Path = typer.Option(None, "--policy", help="Rubric policy JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    """Evaluate a snapshot stored on disk (no network access)."""
    _configure_logging(verbose)
    policy = _load_policy_option(policy_file)

    try:
        result = evaluate_snapshot_file(snapshot_file, policy=policy)
    except RepoEvaluatorError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _print_result(result, as_json)


@app.command()
def policy(
    policy_file: Path = typer.Option(None, "--policy", help="Rubric policy JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the policy as JSON"),
) -> None:
    """Show the active rubric policy."""
    active = _load_policy_option(policy_file)

    if as_json:
        typer.echo(active.model_dump_json(indent=2))
        return

    table = Table(title=f"Rubric Policy {active.version}")
    table.add_column("Dimension", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Action below", justify="right", style="dim")
    for dimension in Dimension:
        threshold = active.actions.threshold_for(dimension)
        table.add_row(
            dimension.value,
            f"{active.weights.weight_for(dimension):.2f}",
            "-" if threshold is None else str(threshold),
        )
    console.print(table)
    console.print(
        f"Levels: Advanced >= {active.levels.advanced}, "
        f"Intermediate >= {active.levels.intermediate}"
    )
    console.print(
        f"Narrative: strength >= {active.narrative.strength}, gap < {active.narrative.gap}"
    )


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Bind address"),
    port: int = typer.Option(5000, "--port", help="Port"),
    token: str = typer.Option(
        None, "--token", "-t", envvar="GITHUB_TOKEN", help="GitHub API token"
    ),
    policy_file: Path = typer.Option(None, "--policy", help="Rubric policy JSON file"),
) -> None:
    """Run the HTTP API."""
    from repo_evaluator.service.app import run_service

    _configure_logging(verbose=True)
    active = _load_policy_option(policy_file)
    console.print(f"GitHub Repository Evaluator API listening on {host}:{port}")
    run_service(host=host, port=port, token=token, policy=active)


if __name__ == "__main__":
    app()
