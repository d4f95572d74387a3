"""Exceptions raised by the circulation service and its collaborators."""


class CirculationError(Exception):
    """Base exception for library circulation errors."""


class InvalidArgumentError(CirculationError, ValueError):
    """A request was malformed (empty title, non-positive copy count)."""


class InvalidOperationError(CirculationError, RuntimeError):
    """A request was well-formed but not permitted (e.g. invalid member)."""


class DirectoryError(CirculationError):
    """A SQL-backed collaborator failed to read or write its store."""
