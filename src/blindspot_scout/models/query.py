"""Disease query models."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from blindspot_scout.constants import DEFAULT_LANGUAGE, DEFAULT_MIN_YEAR


class QueryFilters(BaseModel):
    """Search filters carried with a query.

    Year bounds are applied by whatever retrieves the papers; the pipeline
    only passes them through to the report.
    """

    model_config = ConfigDict(frozen=True)

    exclude_pediatric: bool = False
    min_year: int = DEFAULT_MIN_YEAR
    max_year: int = Field(default_factory=lambda: date.today().year)
    max_results: int | None = None
    language: str = DEFAULT_LANGUAGE
    study_exclusions: list[str] = []


class DiseaseQuery(BaseModel):
    """A free-form disease query plus filters."""

    model_config = ConfigDict(frozen=True)

    disease: str
    filters: QueryFilters = QueryFilters()
