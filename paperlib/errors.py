"""Exception types raised by paper2code."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for paper2code errors."""


class EmptyInputError(AnalysisError):
    """Input text is empty or whitespace-only."""


class MalformedUpstreamError(AnalysisError):
    """An analysis stage handed the assembler a structurally invalid result."""


class GenerationError(AnalysisError):
    """The code-generation model could not be reached or returned no code."""
