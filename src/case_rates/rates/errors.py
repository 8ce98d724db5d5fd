"""Exceptions raised by the registry, the window transform and the feed adapter."""
from __future__ import annotations


class CaseRatesError(Exception):
    """Base class for all case-rates errors."""


class RegionNotFound(CaseRatesError, LookupError):
    """Region name is not present in the population registry."""

    def __init__(self, region: str):
        super().__init__(f"Region not found in population registry: {region!r}")
        self.region = region


class InvalidParameter(CaseRatesError, ValueError):
    """Non-positive population or display ceiling passed to the transform."""


class FeedFormatError(CaseRatesError):
    """The cases feed is missing a required column."""
