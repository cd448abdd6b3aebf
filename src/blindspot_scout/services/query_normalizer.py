"""
Disease query normalizer.

Cleans up a raw disease term before it is used to score relevance, e.g.
"alzheimer" -> "Alzheimer's disease", "type 2 DIABETES" -> "Type 2 Diabetes".
"""

import logging

from blindspot_scout.constants import POSSESSIVE_DISEASES
from blindspot_scout.exceptions import MissingQueryError
from blindspot_scout.models.query import DiseaseQuery

logger = logging.getLogger(__name__)


def normalize_disease_name(raw: str) -> str:
    """
    Normalize a disease name with basic cleanup and common disease patterns.

    Example:
        "alzheimer"          → "Alzheimer's disease"
        "parkinson's"        → "Parkinson's disease"
        "diabetes"           → "Diabetes"
        "multiple SCLEROSIS" → "Multiple Sclerosis"
    """
    trimmed = raw.strip()
    lower = trimmed.lower()

    for term in POSSESSIVE_DISEASES:
        if lower in (term, f"{term}'s"):
            return f"{term.capitalize()}'s disease"

    return " ".join(word.capitalize() for word in trimmed.split())


def normalize_query(query: DiseaseQuery | str | None) -> DiseaseQuery:
    """Validate a query and normalize its disease name.

    Raises:
        MissingQueryError: if there is no query or the disease is blank.
    """
    if query is None:
        raise MissingQueryError("No query provided")
    if isinstance(query, str):
        query = DiseaseQuery(disease=query)
    if not query.disease.strip():
        raise MissingQueryError("Query has an empty disease name")

    normalized = normalize_disease_name(query.disease)
    logger.info("Normalized '%s' → '%s'", query.disease, normalized)
    return query.model_copy(update={"disease": normalized})
