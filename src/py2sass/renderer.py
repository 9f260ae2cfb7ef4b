"""Stylesheet document builder.

Builds SCSS text from a sequence of calls instead of a literal template.
Every block construct takes a body callable that receives the renderer, so
nesting reads the same way the generated stylesheet does:

    def page(r):
        primary = r.v("primary", "#007bff")
        r.s(".button", lambda r: r.background_color(primary))

    scss = Renderer(page).to_sass()

Names in the CSS property vocabulary are exposed as attributes
(``r.max_width("1200px")``, ``r.font_face(body=...)``). Any other public
attribute is a fallback declaration with underscores turned into hyphens,
so properties missing from the vocabulary still render.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import partial
from typing import TYPE_CHECKING, Any

from py2sass.exceptions import RendererFinalizedError
from py2sass.properties import DIRECTIVE_MARKER, lookup, property_name

if TYPE_CHECKING:
    from py2sass.compiler import CompilationEngine, IncludeItem

logger = logging.getLogger(__name__)

Body = Callable[["Renderer"], Any]
ContextBody = Callable[["SelectorContext"], Any]

INDENT = "  "


def _arguments(args: tuple[Any, ...]) -> str:
    """Render ``(a, b)`` for a non-empty argument list, nothing otherwise."""
    if not args:
        return ""
    return f"({', '.join(str(arg) for arg in args)})"


def _split_body(args: tuple[Any, ...], body: Body | None) -> tuple[tuple[Any, ...], Body | None]:
    """Separate a body passed positionally after variadic arguments.

    ``r.media("print", fn)`` is read as ``r.media("print", body=fn)``.

    Raises:
        TypeError: If a callable appears anywhere else among the arguments
    """
    if body is None and args and callable(args[-1]):
        args, body = args[:-1], args[-1]
    for arg in args:
        if callable(arg):
            raise TypeError(f"Block body must be the last argument, got callable {arg!r} before it")
    return args, body


class Renderer:
    """Accumulates SCSS text from builder calls.

    The body passed to the constructor runs once, on the first call to
    ``to_sass()``. The result is cached; later calls return the same text
    and the renderer rejects further writes.

    Usage:
        renderer = Renderer(lambda r: r.s(".box", lambda r: r.width("100%")))
        scss = renderer.to_sass()
        css = renderer.to_css(compress=True)
    """

    def __init__(self, body: Body | None = None) -> None:
        """Initialize the renderer.

        Args:
            body: Callable that issues builder calls against this renderer
        """
        self._body = body
        self._buffer: list[str] = []
        self._indentation = 0
        self._variables: dict[str, str] = {}
        self._output: str | None = None
        self._building = False

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def indentation(self) -> int:
        """Current nesting depth."""
        return self._indentation

    @property
    def variables(self) -> dict[str, str]:
        """Declared variables mapped to their ``$name`` reference tokens."""
        return dict(self._variables)

    @property
    def finalized(self) -> bool:
        return self._output is not None

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def declare(self, name: str, value: Any) -> None:
        """Write a ``name: value;`` declaration.

        Args:
            name: CSS property name, used as given
            value: Property value
        """
        self._write_line(f"{name}: {value};")

    def v(self, name: str, value: Any) -> str:
        """Declare a variable.

        Args:
            name: Variable name without the ``$`` sigil
            value: Variable value

        Returns:
            Reference token (``$name``) usable in later values
        """
        token = f"${name}"
        self._write_line(f"{token}: {value};")
        self._variables[str(name)] = token
        return token

    def include(self, name: str, *args: Any) -> None:
        """Write ``@include name(args);``, without parentheses when there are no args."""
        self._write_line(f"@include {name}{_arguments(args)};")

    def import_(self, path: str) -> None:
        self._write_line(f"@import '{path}';")

    def extend(self, selector: str) -> None:
        self._write_line(f"@extend {selector};")

    def return_(self, value: Any) -> None:
        self._write_line(f"@return {value};")

    def raw(self, text: str) -> None:
        """Append text verbatim.

        No indentation is applied and no newline is added; include one in
        ``text`` if the next call should start on a new line.
        """
        self._check_writable()
        self._buffer.append(str(text))

    # -------------------------------------------------------------------------
    # Blocks
    # -------------------------------------------------------------------------

    def s(self, selector: str, body: Body | None = None) -> None:
        """Write a rule block.

        Args:
            selector: Selector text (e.g. ".container", "&:hover")
            body: Callable receiving this renderer
        """
        with self._block(f"{selector} {{"):
            if body is not None:
                body(self)

    def s_with_context(self, selector: str, body: ContextBody | None = None) -> None:
        """Write a rule block whose body receives a SelectorContext.

        The context turns attribute calls into nested pseudo-class blocks:
        ``ctx.hover(body)`` writes ``&:hover { ... }``.

        Args:
            selector: Selector text
            body: Callable receiving a SelectorContext bound to this renderer
        """
        with self._block(f"{selector} {{"):
            if body is not None:
                body(SelectorContext(self))

    rule = s
    rule_with_context = s_with_context

    def directive(self, name: str, *args: Any, body: Body | None = None) -> None:
        """Write a generic ``@name args { ... }`` block.

        Args:
            name: Directive name, with or without the leading ``@``
            *args: Prelude parts, joined with spaces; a trailing callable
                is taken as the body
            body: Callable receiving this renderer

        Raises:
            TypeError: If a callable appears before the last argument
        """
        args, body = _split_body(args, body)
        if not name.startswith(DIRECTIVE_MARKER):
            name = f"{DIRECTIVE_MARKER}{name}"
        opening = " ".join([name, *(str(arg) for arg in args)])
        self._nested(f"{opening} {{", body)

    def media(self, *queries: Any, body: Body | None = None) -> None:
        self.directive("@media", *queries, body=body)

    def keyframes(self, name: str, body: Body | None = None) -> None:
        self.directive("@keyframes", name, body=body)

    def mixin(self, name: str, *params: Any, body: Body | None = None) -> None:
        """Write ``@mixin name(params) { ... }``."""
        params, body = _split_body(params, body)
        self._nested(f"@mixin {name}{_arguments(params)} {{", body)

    def function(self, name: str, *params: Any, body: Body | None = None) -> None:
        """Write ``@function name(params) { ... }``."""
        params, body = _split_body(params, body)
        self._nested(f"@function {name}{_arguments(params)} {{", body)

    def if_statement(self, condition: str, body: Body | None = None) -> None:
        self._nested(f"@if {condition} {{", body)

    def else_if_statement(self, condition: str, body: Body | None = None) -> None:
        self._nested(f"@else if {condition} {{", body)

    def else_statement(self, body: Body | None = None) -> None:
        self._nested("@else {", body)

    def for_loop(
        self,
        variable: str,
        *,
        from_: Any,
        to: Any,
        body: Body | None = None,
    ) -> None:
        """Write ``@for $variable from X through Y { ... }`` (inclusive bounds).

        Args:
            variable: Loop variable name without the ``$`` sigil
            from_: Lower bound
            to: Upper bound, inclusive
            body: Callable receiving this renderer
        """
        self._nested(f"@for ${variable} from {from_} through {to} {{", body)

    def each_loop(self, variable: str, items: Any, body: Body | None = None) -> None:
        """Write ``@each $variable in items { ... }``.

        Args:
            variable: Loop variable name without the ``$`` sigil
            items: List text (``"red, green, blue"``) or a sequence of items
            body: Callable receiving this renderer
        """
        if not isinstance(items, str):
            items = ", ".join(str(item) for item in items)
        self._nested(f"@each ${variable} in {items} {{", body)

    def while_loop(self, condition: str, body: Body | None = None) -> None:
        self._nested(f"@while {condition} {{", body)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_sass(self) -> str:
        """Run the body (first call only) and return the SCSS text.

        Returns:
            The finished document; identical on every call

        Raises:
            RuntimeError: If called from inside the body while it is running
        """
        if self._output is not None:
            return self._output

        if self._building:
            raise RuntimeError("to_sass() called while the stylesheet body is running")

        self._building = True
        try:
            if self._body is not None:
                self._body(self)
        except BaseException:
            # No partial documents: drop whatever the body wrote before failing
            self._buffer.clear()
            self._variables.clear()
            self._indentation = 0
            raise
        finally:
            self._building = False

        self._output = "".join(self._buffer)
        logger.debug(
            "Rendered stylesheet (%d characters, %d variables)",
            len(self._output),
            len(self._variables),
        )
        return self._output

    def to_css(
        self,
        include: "list[IncludeItem] | IncludeItem | None" = None,
        compress: bool = False,
        engine: "CompilationEngine | None" = None,
    ) -> str:
        """Compile the document to CSS.

        Args:
            include: Extra sources prepended before compilation (file paths,
                literal SCSS strings, or readable streams)
            compress: Use compressed output style instead of expanded
            engine: Compilation engine (default: libsass)

        Returns:
            Compiled CSS text

        Raises:
            UnsupportedIncludeTypeError: If an include item has an unsupported type
            CompilationError: If the engine rejects the combined source
        """
        from py2sass.compiler import CssRenderer

        return CssRenderer(self.to_sass(), include, compress, engine=engine).render()

    def __str__(self) -> str:
        return self.to_sass()

    def __repr__(self) -> str:
        state = "finalized" if self.finalized else "pending"
        return f"Renderer({state}, chunks={len(self._buffer)})"

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def __getattr__(self, name: str) -> Callable[..., None]:
        # Only reached for names that are not real attributes or methods
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        prop = lookup(name)
        if prop is None:
            return partial(self.declare, property_name(name))
        if prop.is_directive:
            return partial(self.directive, prop.name)
        return partial(self.declare, prop.name)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _check_writable(self) -> None:
        if self._output is not None:
            raise RendererFinalizedError()

    def _write_line(self, line: str) -> None:
        self._check_writable()
        self._buffer.append(f"{INDENT * self._indentation}{line}\n")

    @contextmanager
    def _block(self, opening: str) -> Iterator[None]:
        self._write_line(opening)
        self._indentation += 1
        try:
            yield
        finally:
            self._indentation -= 1
        self._write_line("}")

    def _nested(self, opening: str, body: Body | None) -> None:
        with self._block(opening):
            if body is not None:
                body(self)


class SelectorContext:
    """Writes ``&:pseudo`` blocks on a parent renderer.

    Any public attribute is a pseudo-class: ``ctx.hover(body)`` writes
    ``&:hover { ... }`` and ``ctx.first_child(body)`` writes
    ``&:first-child { ... }``. The context holds no text of its own.
    """

    __slots__ = ("renderer",)

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def pseudo(self, name: str, body: Body | None = None) -> None:
        """Write ``&:name { ... }`` on the parent renderer."""
        self.renderer.s(f"&:{name}", body)

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return partial(self.pseudo, property_name(name))

    def __repr__(self) -> str:
        return f"SelectorContext({self.renderer!r})"


def stylesheet(body: Body) -> Renderer:
    """Decorator turning a body function into a Renderer.

    Usage:
        @stylesheet
        def theme(r):
            r.s("body", lambda r: r.margin(0))

        theme.to_sass()
    """
    return Renderer(body)
