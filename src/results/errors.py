"""
Errors raised by the results engine.

Input and structural problems abort the call; a selection whose design
cannot be resolved only produces a MissingDesignWarning and is skipped.
"""


class AnalysisError(Exception):
    """Base class for results engine failures."""


class EmptyInputError(AnalysisError, ValueError):
    """Selections or designs are missing, empty, or not a sequence."""


class InvalidProfileError(AnalysisError, ValueError):
    """The formatter received analysis results without a usable profile."""


class MissingDesignWarning(UserWarning):
    """A selection references a design that is unknown or has no tags."""
