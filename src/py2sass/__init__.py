"""py2sass - Build SCSS stylesheets from Python.

A Renderer turns builder calls into indented SCSS text and can hand the
result to a Sass compiler (libsass) for CSS output:

    from py2sass import Renderer

    def page(r):
        r.s(".container", lambda r: (r.width("100%"), r.max_width("1200px")))

    Renderer(page).to_css(compress=True)
"""

from py2sass.exceptions import (
    Py2SassError,
    RendererFinalizedError,
    ScriptLoadError,
    UnsupportedIncludeTypeError,
)
from py2sass.renderer import Renderer, SelectorContext, stylesheet

__version__ = "0.1.0"

__all__ = [
    "Renderer",
    "SelectorContext",
    "stylesheet",
    "Py2SassError",
    "RendererFinalizedError",
    "ScriptLoadError",
    "UnsupportedIncludeTypeError",
]
