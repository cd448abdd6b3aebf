"""Blind spot model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: 0 for critical through 3 for low."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}


class BlindSpot(BaseModel):
    """A demographic coverage gap. Derived each run, never persisted."""

    model_config = ConfigDict(frozen=True)

    category: str  # age, gender, pregnancy, geography, or data / error
    gap: str  # human-readable description
    severity: Severity
    details: str | None = None
