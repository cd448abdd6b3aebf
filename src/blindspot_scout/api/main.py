"""FastAPI application."""

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from blindspot_scout import __version__
from blindspot_scout.agents.orchestrator import Orchestrator
from blindspot_scout.config import PipelineConfig, get_settings
from blindspot_scout.exceptions import MissingQueryError
from blindspot_scout.models.paper import PaperRecord
from blindspot_scout.models.query import DiseaseQuery
from blindspot_scout.models.state import PipelineState

app = FastAPI(
    title="BlindSpot Scout API",
    description="API for detecting demographic blind spots in research literature",
    version=__version__,
)


class AnalyzeRequest(BaseModel):
    query: DiseaseQuery
    papers: list[PaperRecord] = []
    current_year: int | None = None


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/analyze")
async def analyze(request: AnalyzeRequest) -> PipelineState:
    """Run the full pipeline over the submitted papers."""
    config = PipelineConfig.from_settings(get_settings(), current_year=request.current_year)
    try:
        async with Orchestrator(config) as orchestrator:
            return await orchestrator.run(request.query, request.papers)
    except MissingQueryError as e:
        raise HTTPException(status_code=422, detail=str(e))
