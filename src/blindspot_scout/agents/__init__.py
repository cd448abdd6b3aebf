"""Agent modules for BlindSpot Scout."""

from blindspot_scout.agents.base import BaseAgent
from blindspot_scout.agents.orchestrator import Orchestrator, build_extractor

__all__ = ["BaseAgent", "Orchestrator", "build_extractor"]
