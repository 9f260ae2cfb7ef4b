"""Exceptions raised by py2sass.

Compilation failures are not defined here: the engine's own error type is
re-exported as ``py2sass.compiler.CompilationError`` and propagates unchanged.
"""

from typing import Any


class Py2SassError(Exception):
    """Base class for errors defined by py2sass."""


class UnsupportedIncludeTypeError(Py2SassError, TypeError):
    """Raised when an include item is not a string, path, or readable stream."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.type_name = type(value).__name__
        super().__init__(f"Unsupported include type: {self.type_name}")


class RendererFinalizedError(Py2SassError, RuntimeError):
    """Raised when writing to a renderer whose output was already produced."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Renderer output already finalized; create a new Renderer")


class ScriptLoadError(Py2SassError):
    """Raised when a stylesheet build script cannot be loaded."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to load stylesheet script {path}: {message}")
