"""BlindSpot Scout: find demographic blind spots in medical research literature."""

__version__ = "0.1.0"
