"""
narrative_graph.exceptions - Custom exception classes.

All Narrative Graph exceptions inherit from NarrativeGraphError.
"""


class NarrativeGraphError(Exception):
    """Base exception for all Narrative Graph errors."""

    pass


class InvalidInputError(NarrativeGraphError, ValueError):
    """A caller passed text, names or documents of the wrong shape."""

    pass


class LoaderError(NarrativeGraphError):
    """A source file could not be read."""

    pass


class UnsupportedFormatError(LoaderError):
    """A source file has a suffix the loader does not handle."""

    def __init__(self, path: str, suffix: str):
        self.path = path
        self.suffix = suffix
        super().__init__(f"Unsupported file format: {suffix or '(none)'} ({path})")
