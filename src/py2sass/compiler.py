"""Compilation of generated SCSS to CSS.

The renderer produces SCSS text; this module prepends any include sources and
hands the result to a compilation engine. Engines follow a small adapter
interface so the Sass implementation can be swapped without touching the
renderer. The default engine is libsass.

Compilation errors are the engine's own exception type, re-exported here as
``CompilationError``. They are never caught or wrapped.
"""

import logging
import os
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import sass

from py2sass.exceptions import UnsupportedIncludeTypeError

logger = logging.getLogger(__name__)

CompilationError = sass.CompileError


@runtime_checkable
class Readable(Protocol):
    """Any stream-like object with a ``read()`` method."""

    def read(self) -> str | bytes: ...


IncludeItem = str | os.PathLike[str] | Readable


class OutputStyle(Enum):
    """Engine output style."""

    EXPANDED = "expanded"
    COMPRESSED = "compressed"

    @classmethod
    def from_compress(cls, compress: bool) -> "OutputStyle":
        return cls.COMPRESSED if compress else cls.EXPANDED


# =============================================================================
# Engines
# =============================================================================


class CompilationEngine(ABC):
    """Interface for Sass compilation engines.

    Each engine takes complete SCSS source and returns CSS, raising its own
    error type on invalid input.

    Attributes:
        name: Engine identifier (e.g. "libsass")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._version: str | None = None

    @property
    def version(self) -> str | None:
        """Get the engine version (cached after first check)."""
        if self._version is None:
            self._version = self.get_version()
        return self._version

    @abstractmethod
    def check_available(self) -> bool:
        """Verify the engine can compile.

        Returns:
            True if the engine is usable, False otherwise
        """

    @abstractmethod
    def get_version(self) -> str | None:
        """Return the engine version string, if known."""

    @abstractmethod
    def compile(self, text: str, style: OutputStyle) -> str:
        """Compile SCSS source to CSS.

        Args:
            text: Complete SCSS source
            style: Output style

        Returns:
            Compiled CSS

        Raises:
            CompilationError: If the source is not valid SCSS
        """

    def get_metadata(self) -> dict[str, Any]:
        """Get engine metadata for logging and debugging."""
        return {
            "name": self.name,
            "version": self.version,
            "available": self.check_available(),
        }


class LibSassEngine(CompilationEngine):
    """Compiles SCSS with libsass.

    Args:
        include_paths: Directories searched by ``@import`` in the source
        precision: Decimal precision for numbers in the output
    """

    def __init__(
        self,
        include_paths: list[str] | None = None,
        precision: int = 5,
    ) -> None:
        super().__init__(name="libsass")
        self.include_paths = list(include_paths or [])
        self.precision = precision

    def check_available(self) -> bool:
        try:
            sass.compile(string="a{b:c}")
        except Exception as e:
            logger.debug("libsass self-check failed: %s", e)
            return False
        return True

    def get_version(self) -> str | None:
        return getattr(sass, "libsass_version", None) or getattr(sass, "__version__", None)

    def compile(self, text: str, style: OutputStyle) -> str:
        return sass.compile(
            string=text,
            output_style=style.value,
            include_paths=self.include_paths,
            precision=self.precision,
        )


# =============================================================================
# Include resolution
# =============================================================================


def resolve_include(item: Any) -> str:
    """Resolve one include item to SCSS text.

    Resolution order:
    1. String naming an existing file: the file contents
    2. Any other string: the string itself
    3. Path-like object: the file contents
    4. Object with a ``read()`` method: everything it returns

    Args:
        item: Include item

    Returns:
        Resolved SCSS text

    Raises:
        UnsupportedIncludeTypeError: If the item is none of the above
        FileNotFoundError: If a path-like item does not exist
    """
    if isinstance(item, str):
        if os.path.isfile(item):
            logger.debug("Reading include file: %s", item)
            return Path(item).read_text(encoding="utf-8")
        return item

    if isinstance(item, os.PathLike):
        logger.debug("Reading include file: %s", item)
        return Path(item).read_text(encoding="utf-8")

    if isinstance(item, Readable):
        content = item.read()
        if isinstance(content, bytes):
            return content.decode("utf-8")
        return str(content)

    raise UnsupportedIncludeTypeError(item)


def process_includes(include: Any) -> str:
    """Resolve include items and join them, each followed by a newline.

    Args:
        include: A list of include items, a single item, or None

    Returns:
        Combined include text ("" when there is nothing to include)
    """
    if include is None:
        return ""

    items = include if isinstance(include, (list, tuple)) else [include]
    return "".join(f"{resolve_include(item)}\n" for item in items)


# =============================================================================
# Renderer
# =============================================================================


class CssRenderer:
    """Compiles a finished SCSS document together with its includes.

    Usage:
        css = CssRenderer(scss, include=["_variables.scss"], compress=True).render()
    """

    def __init__(
        self,
        sass_text: str,
        include: Any = None,
        compress: bool = False,
        engine: CompilationEngine | None = None,
    ) -> None:
        """Initialize the CSS renderer.

        Args:
            sass_text: SCSS document text
            include: Include items prepended to the document, in order
            compress: Use compressed output style
            engine: Compilation engine (default: LibSassEngine)
        """
        self.sass_text = sass_text
        self.include = include
        self.compress = compress
        self.engine = engine or LibSassEngine()

    @property
    def style(self) -> OutputStyle:
        return OutputStyle.from_compress(self.compress)

    def combined_source(self) -> str:
        """Return the include text followed by the document text."""
        return process_includes(self.include) + self.sass_text

    def render(self) -> str:
        """Compile to CSS.

        Returns:
            CSS exactly as returned by the engine

        Raises:
            UnsupportedIncludeTypeError: If an include item has an unsupported type
            CompilationError: If the engine rejects the source
        """
        source = self.combined_source()
        logger.debug(
            "Compiling %d characters with %s (%s)",
            len(source),
            self.engine.name,
            self.style.value,
        )
        css = self.engine.compile(source, self.style)
        logger.debug("Compiled stylesheet (%d characters)", len(css))
        return css


def compile_string(
    sass_text: str,
    include: Any = None,
    compress: bool = False,
    engine: CompilationEngine | None = None,
) -> str:
    """Compile SCSS text to CSS. Shortcut for ``CssRenderer(...).render()``."""
    return CssRenderer(sass_text, include, compress, engine=engine).render()
