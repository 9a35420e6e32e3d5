"""CLI for classifying already-produced submodule status output."""

import json
import logging
from pathlib import Path
from typing import TextIO

import click
import structlog

from src.observability.logging import (
    bind_repo_context,
    clear_repo_context,
    configure_logging,
)
from src.settings import get_settings
from src.submodules import (
    StatusClassifier,
    Submodule,
    parse_status_output,
    summarize,
)


logger = structlog.get_logger()

UNSET_LABEL = "UNSET"


def _format_text(submodule: Submodule) -> str:
    record = submodule.record
    status = record.status.value if record.status else UNSET_LABEL
    message = record.status_message or ""
    return (
        f"{status:<16} {record.name} {record.object_id} ({record.reference})"
        f" [{submodule.health.value}] {message}"
    ).rstrip()


def _to_json(submodules: list[Submodule]) -> str:
    payload = [
        {**s.record.model_dump(mode="json"), "health": s.health.value}
        for s in submodules
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False)


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Git submodule status classification CLI."""


@cli.command()
@click.option(
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="File holding 'git submodule status' output (default: stdin).",
)
@click.option(
    "--repo-root",
    "repo_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Repository root (default: SUBMODULES_REPO_ROOT, then the working directory).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Use JSON format for logs (default: SUBMODULES_LOG_JSON).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging.",
)
def status(
    input_file: TextIO,
    repo_root: Path | None,
    output_format: str,
    json_logs: bool | None,
    verbose: bool,
) -> None:
    """Classify each line of submodule status output."""
    settings = get_settings()
    configure_logging(
        level=logging.DEBUG if verbose else settings.log_level_number,
        json_format=settings.log_json if json_logs is None else json_logs,
    )

    root = str(repo_root or settings.repo_root or Path.cwd())
    bind_repo_context(root)
    try:
        submodules = parse_status_output(
            input_file.read(), root, StatusClassifier()
        )
        summary = summarize(submodules)
        logger.info(
            "submodule_status_complete",
            component="cli",
            total=summary.total,
            unset=summary.unset,
            counts={code.value: count for code, count in summary.counts.items()},
        )
    finally:
        clear_repo_context()

    if output_format == "json":
        click.echo(_to_json(submodules))
        return

    for submodule in submodules:
        click.echo(_format_text(submodule))


def main() -> None:
    """Entry point for the ``submodules`` console script."""
    cli()


if __name__ == "__main__":
    main()
