"""Base agent class."""

from abc import ABC, abstractmethod
from typing import Any

from blindspot_scout.models.state import PipelineState


class BaseAgent(ABC):
    """Abstract base class for all pipeline agents."""

    name: str = "base"

    @abstractmethod
    async def run(self, state: PipelineState) -> dict[str, Any]:
        """Execute the agent's stage and return a partial state update."""
        pass
