"""Paper record model.

This is the data contract between whatever retrieves literature and the
pipeline. Records are immutable once built; missing or malformed fields fall
back to defaults instead of failing validation.
"""

import hashlib
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_YEAR_RE = re.compile(r"\s*(\d{4})")

PUBMED_ARTICLE_URL = "https://pubmed.ncbi.nlm.nih.gov/{pmid}/"


class SourceCategory(str, Enum):
    PUBMED = "PubMed"
    GOOGLE_SCHOLAR = "GoogleScholar"
    ARXIV = "ArXiv"
    OTHER = "Other"


def parse_year(publication_date: str | None) -> int | None:
    """Return the leading four-digit year of a date string, or None."""
    if not publication_date:
        return None
    match = _YEAR_RE.match(publication_date)
    return int(match.group(1)) if match else None


class PaperRecord(BaseModel):
    """A single retrieved paper."""

    model_config = ConfigDict(frozen=True)

    doi: str = ""  # may be empty for preprints
    title: str = ""
    authors: list[str] = []
    journal: str = ""
    publication_date: str = ""  # year-resolvable, e.g. "2021", "2021-03-04"
    abstract: str = ""
    source: SourceCategory = SourceCategory.OTHER
    url: str | None = None
    citations: int | None = None

    @model_validator(mode="before")
    @classmethod
    def coerce_nones(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        for field_name, field_info in cls.model_fields.items():
            if values.get(field_name, "") is None and field_info.default is not None:
                values[field_name] = field_info.default
        return values

    @field_validator("doi", "title", "journal", "publication_date", "abstract", mode="before")
    @classmethod
    def coerce_scalars_to_str(cls, value: Any) -> Any:
        # PubMed years and numeric ids often arrive as ints
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("source", mode="before")
    @classmethod
    def coerce_unknown_source(cls, value: Any) -> Any:
        if isinstance(value, SourceCategory):
            return value
        try:
            return SourceCategory(value)
        except ValueError:
            return SourceCategory.OTHER

    @property
    def identifier(self) -> str:
        """DOI, else URL, else title; a content hash if all three are empty."""
        if self.doi or self.url or self.title:
            return self.doi or self.url or self.title
        raw = "|".join(
            [",".join(self.authors), self.journal, self.publication_date, self.abstract]
        )
        return f"untitled-{hashlib.sha256(raw.encode()).hexdigest()[:12]}"

    @property
    def text(self) -> str:
        """Title and abstract joined, as used for keyword extraction."""
        return f"{self.title} {self.abstract}"

    @property
    def year(self) -> int | None:
        return parse_year(self.publication_date)

    @classmethod
    def from_pubmed(cls, record: dict[str, Any]) -> "PaperRecord":
        """Build a record from a parsed PubMed abstract (pmid/title/abstract/...)."""
        pmid = record.get("pmid") or ""
        return cls(
            doi=record.get("doi") or "",
            title=record.get("title") or "",
            authors=record.get("authors") or [],
            journal=record.get("journal") or "",
            publication_date=record.get("pub_date") or "",
            abstract=record.get("abstract") or "",
            source=SourceCategory.PUBMED,
            url=PUBMED_ARTICLE_URL.format(pmid=pmid) if pmid else None,
        )
