"""Command-line interface for BlindSpot Scout."""

import asyncio
import json
import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from blindspot_scout.agents.orchestrator import Orchestrator
from blindspot_scout.config import PipelineConfig, get_settings
from blindspot_scout.exceptions import BlindSpotScoutError
from blindspot_scout.models.paper import PaperRecord
from blindspot_scout.models.query import DiseaseQuery, QueryFilters
from blindspot_scout.models.state import PipelineState

SEVERITY_COLORS = {
    "critical": "red",
    "high": "yellow",
    "medium": "cyan",
    "low": "white",
}


def load_papers(path: Path, input_format: str = "records") -> list[PaperRecord]:
    """Load paper records from a JSON file.

    The file holds either a list of records or an object with a "papers" list.
    With ``input_format="pubmed"`` each entry is a parsed PubMed abstract.
    """
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}")

    if isinstance(data, dict):
        data = data.get("papers", [])
    if not isinstance(data, list):
        raise click.ClickException(f"{path} must contain a list of papers")

    try:
        if input_format == "pubmed":
            return [PaperRecord.from_pubmed(item) for item in data]
        return [PaperRecord.model_validate(item) for item in data]
    except (ValidationError, AttributeError) as e:
        raise click.ClickException(f"Invalid paper record in {path}: {e}")


async def run_pipeline(
    config: PipelineConfig, query: DiseaseQuery, papers: list[PaperRecord]
) -> PipelineState:
    async with Orchestrator(config) as orchestrator:
        return await orchestrator.run(query, papers)


@click.group()
@click.version_option(package_name="blindspot-scout")
def main():
    """BlindSpot Scout: find demographic blind spots in research literature."""
    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("-d", "--disease", required=True, help="Disease or condition to analyze")
@click.option(
    "-p",
    "--papers",
    "papers_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file of paper records",
)
@click.option(
    "--input-format",
    type=click.Choice(["records", "pubmed"]),
    default="records",
    show_default=True,
    help="Shape of the entries in the papers file",
)
@click.option(
    "-s",
    "--strategy",
    type=click.Choice(["keyword", "llm"]),
    default=None,
    help="Demographic extraction strategy (defaults to settings)",
)
@click.option(
    "-b",
    "--backend",
    type=click.Choice(["mock", "anthropic"]),
    default=None,
    help="LLM backend for the llm strategy (defaults to settings)",
)
@click.option(
    "-n",
    "--top-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of blind spots to report",
)
@click.option("--current-year", type=int, default=None, help="Year used for recency scoring")
@click.option("--exclude-pediatric", is_flag=True, help="Record a pediatric-exclusion filter")
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file path (JSON)")
def analyze(
    disease: str,
    papers_path: Path,
    input_format: str,
    strategy: str | None,
    backend: str | None,
    top_n: int | None,
    current_year: int | None,
    exclude_pediatric: bool,
    output: Path | None,
):
    """Score papers, detect demographic blind spots and print a report."""
    papers = load_papers(papers_path, input_format)
    config = PipelineConfig.from_settings(
        get_settings(),
        extraction_strategy=strategy,
        llm_backend=backend,
        top_blind_spots=top_n,
        current_year=current_year,
    )
    query = DiseaseQuery(
        disease=disease, filters=QueryFilters(exclude_pediatric=exclude_pediatric)
    )

    click.echo(f"Analyzing {len(papers)} papers for: {disease}")
    try:
        state = asyncio.run(run_pipeline(config, query, papers))
    except BlindSpotScoutError as e:
        raise click.ClickException(str(e))

    report = state.report
    metrics = report.key_metrics
    click.echo(f"Total papers: {metrics.total_papers}")
    click.echo(f"High quality papers: {metrics.high_quality_papers}")
    if metrics.time_range:
        click.echo(f"Time range: {metrics.time_range}")

    click.echo("\nEXECUTIVE SUMMARY")
    click.echo(report.executive_summary)

    click.echo("\nMAIN BLIND SPOTS")
    for i, spot in enumerate(report.main_blind_spots, 1):
        label = click.style(
            f"[{spot.severity.value.upper()}]", fg=SEVERITY_COLORS[spot.severity.value]
        )
        click.echo(f"  {i}. {label} {spot.gap}")

    if report.recommendations:
        click.echo("\nRECOMMENDATIONS")
        for recommendation in report.recommendations:
            click.echo(f"  - {recommendation}")

    if output:
        output.write_text(state.model_dump_json(indent=2))
        click.echo(f"\nResults saved to: {output}")


if __name__ == "__main__":
    main()
