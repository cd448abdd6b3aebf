"""Exceptions raised across the BlindSpot Scout pipeline."""


class BlindSpotScoutError(Exception):
    """Base exception for pipeline failures."""


class MissingQueryError(BlindSpotScoutError):
    """Raised when the pipeline is invoked without a usable disease query."""


class ExtractionError(BlindSpotScoutError):
    """Raised when an extraction strategy cannot produce per-paper signals."""

    def __init__(self, strategy: str, message: str):
        self.strategy = strategy
        super().__init__(f"[{strategy}] {message}")
