"""CLI entry point for resumegate."""

import logging
import sys
from pathlib import Path

import click

from .adapters.extract import create_extractor
from .adapters.llm import create_llm_adapter
from .adapters.render import RENDERERS, create_renderer
from .adapters.storage import FilesystemAdapter
from .config import load_settings
from .domain.models import GateResult, SanitizationResult
from .domain.services import ProcessingService, screen_text

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def read_text(path: Path) -> str:
    """Read resume text from a .txt file or extract it from PDF/DOCX."""
    if path.suffix.lower() == ".txt":
        return path.read_text(encoding="utf-8", errors="replace")
    try:
        extractor = create_extractor(path)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="FILE") from None
    return extractor.extract(path).text


def format_verdict(verdict: GateResult, sanitized: SanitizationResult | None) -> list[str]:
    """Render gate and sanitizer outcome as report lines."""
    if not verdict.passed:
        kind = verdict.rejection_type.value if verdict.rejection_type else "unknown"
        lines = [f"rejected: {kind}", f"reason: {verdict.error}"]
        lines.extend(f"  - {detail}" for detail in verdict.details)
        return lines

    if sanitized is None or not sanitized.is_safe:
        issue = sanitized.critical_issue if sanitized else None
        return ["rejected: injection", f"reason: {issue}"]

    lines = ["passed", f"removed_lines: {len(sanitized.removed_patterns)}"]
    lines.extend(f"  - {entry}" for entry in sanitized.removed_patterns)
    return lines


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", type=click.Path(exists=True), help="Config file path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """resumegate - screen resumes before paying for an LLM call."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None


@cli.command()
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def check(ctx: click.Context, file: Path) -> None:
    """Run the rejection gate and sanitizer on a resume."""
    settings = load_settings(ctx.obj["config_path"])
    verdict, sanitized = screen_text(read_text(file), settings.gate)

    for line in format_verdict(verdict, sanitized):
        click.echo(line)
    if not verdict.passed or sanitized is None or not sanitized.is_safe:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def sanitize(ctx: click.Context, file: Path) -> None:
    """Print the sanitized resume text."""
    settings = load_settings(ctx.obj["config_path"])
    verdict, sanitized = screen_text(read_text(file), settings.gate)

    if not verdict.passed or sanitized is None or not sanitized.is_safe:
        for line in format_verdict(verdict, sanitized):
            click.echo(line, err=True)
        sys.exit(1)

    click.echo(sanitized.sanitized)


@cli.command()
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--job-description",
    type=click.Path(exists=True, path_type=Path),
    help="Text file with a job posting to tailor the resume to",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(sorted(RENDERERS)),
    default="yaml",
    show_default=True,
    help="Output format",
)
@click.option("--keep", is_flag=True, help="Don't move rejected files to quarantine")
@click.pass_context
def process(
    ctx: click.Context,
    file: Path,
    job_description: Path | None,
    fmt: str,
    keep: bool,
) -> None:
    """Process a single resume file."""
    settings = load_settings(ctx.obj["config_path"])

    try:
        extractor = create_extractor(file)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="FILE") from None

    # Wire up adapters
    service = ProcessingService(
        extractor=extractor,
        llm=create_llm_adapter(settings.llm),
        renderer=create_renderer(fmt),
        storage=FilesystemAdapter(settings.paths.output),
        gate=settings.gate,
        upload=settings.upload,
        quarantine_dir=settings.paths.quarantine if not keep else None,
    )

    jd_text = job_description.read_text() if job_description else None
    result = service.process(file, job_description=jd_text)

    if result.success and result.resume:
        click.echo(f"name: {result.resume.contact.name}")
        click.echo(f"positions: {len(result.resume.work_experience)}")
        click.echo(f"text_length: {result.text_length}")
        if result.job_match:
            click.echo(f"match: {result.job_match.level.value}")
        if result.removed_patterns:
            click.echo(f"removed_lines: {len(result.removed_patterns)}")
        if result.output_path:
            click.echo(f"output: {result.output_path}")
    else:
        if result.rejected and result.rejection_type:
            click.echo(f"Rejected ({result.rejection_type.value})", err=True)
        if result.job_match and not result.job_match.can_proceed:
            click.echo(f"Mismatch ({result.job_match.level.value}): {result.job_match.reason}", err=True)
        click.echo(f"Errors: {result.errors}", err=True)
        if result.output_path:
            click.echo(f"Quarantined: {result.output_path}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
