"""CSS property vocabulary.

The vocabulary is a fixed, ordered list of names the renderer recognizes.
Names starting with the directive marker ``@`` open a nested block
(``@media``, ``@supports``, ...); every other name renders as a plain
``name: value;`` declaration.

Method names are derived from CSS names by dropping the marker and turning
hyphens into underscores, so ``max-width`` is reachable as ``max_width`` and
``@font-face`` as ``font_face``.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

DIRECTIVE_MARKER = "@"

CSS_PROPERTIES: tuple[str, ...] = (
    # Box model
    "width",
    "height",
    "min-width",
    "min-height",
    "max-width",
    "max-height",
    "box-sizing",
    "margin",
    "margin-top",
    "margin-right",
    "margin-bottom",
    "margin-left",
    "margin-inline",
    "margin-block",
    "padding",
    "padding-top",
    "padding-right",
    "padding-bottom",
    "padding-left",
    "padding-inline",
    "padding-block",
    "aspect-ratio",
    # Borders and outlines
    "border",
    "border-top",
    "border-right",
    "border-bottom",
    "border-left",
    "border-width",
    "border-style",
    "border-color",
    "border-radius",
    "border-top-left-radius",
    "border-top-right-radius",
    "border-bottom-right-radius",
    "border-bottom-left-radius",
    "border-collapse",
    "border-spacing",
    "outline",
    "outline-width",
    "outline-style",
    "outline-color",
    "outline-offset",
    # Layout
    "display",
    "position",
    "top",
    "right",
    "bottom",
    "left",
    "inset",
    "z-index",
    "float",
    "clear",
    "overflow",
    "overflow-x",
    "overflow-y",
    "visibility",
    "vertical-align",
    "object-fit",
    "object-position",
    # Flexbox
    "flex",
    "flex-direction",
    "flex-wrap",
    "flex-flow",
    "flex-grow",
    "flex-shrink",
    "flex-basis",
    "justify-content",
    "justify-items",
    "justify-self",
    "align-content",
    "align-items",
    "align-self",
    "place-content",
    "place-items",
    "place-self",
    "order",
    "gap",
    "row-gap",
    "column-gap",
    # Grid
    "grid",
    "grid-area",
    "grid-template",
    "grid-template-columns",
    "grid-template-rows",
    "grid-template-areas",
    "grid-auto-columns",
    "grid-auto-rows",
    "grid-auto-flow",
    "grid-column",
    "grid-column-start",
    "grid-column-end",
    "grid-row",
    "grid-row-start",
    "grid-row-end",
    # Typography
    "color",
    "font",
    "font-family",
    "font-size",
    "font-style",
    "font-weight",
    "font-variant",
    "font-display",
    "line-height",
    "letter-spacing",
    "word-spacing",
    "word-break",
    "word-wrap",
    "overflow-wrap",
    "white-space",
    "text-align",
    "text-decoration",
    "text-decoration-color",
    "text-decoration-line",
    "text-decoration-style",
    "text-indent",
    "text-overflow",
    "text-shadow",
    "text-transform",
    "direction",
    "hyphens",
    "src",
    # Backgrounds
    "background",
    "background-color",
    "background-image",
    "background-position",
    "background-repeat",
    "background-size",
    "background-attachment",
    "background-clip",
    "background-origin",
    "background-blend-mode",
    # Lists and tables
    "list-style",
    "list-style-type",
    "list-style-position",
    "list-style-image",
    "table-layout",
    "caption-side",
    "empty-cells",
    # Generated content
    "content",
    "quotes",
    "counter-reset",
    "counter-increment",
    # Effects
    "opacity",
    "box-shadow",
    "filter",
    "backdrop-filter",
    "mix-blend-mode",
    "clip-path",
    "mask",
    # Transforms, transitions and animations
    "transform",
    "transform-origin",
    "transform-style",
    "perspective",
    "transition",
    "transition-property",
    "transition-duration",
    "transition-timing-function",
    "transition-delay",
    "animation",
    "animation-name",
    "animation-duration",
    "animation-timing-function",
    "animation-delay",
    "animation-iteration-count",
    "animation-direction",
    "animation-fill-mode",
    "animation-play-state",
    "will-change",
    # Interaction
    "cursor",
    "pointer-events",
    "user-select",
    "resize",
    "scroll-behavior",
    "touch-action",
    "appearance",
    "accent-color",
    "caret-color",
    # Columns and containment
    "columns",
    "column-count",
    "column-width",
    "column-rule",
    "contain",
    "container-type",
    "container-name",
    # Directives
    "@media",
    "@keyframes",
    "@font-face",
    "@supports",
    "@page",
    "@layer",
    "@container",
    "@document",
    "@counter-style",
    "@font-feature-values",
    "@property",
    "@scope",
    "@starting-style",
    "@at-root",
    "@mixin",
    "@function",
    "@if",
    "@else",
    "@for",
    "@each",
    "@while",
)


class PropertyKind(Enum):
    """How a vocabulary word renders."""

    DECLARATION = "declaration"
    DIRECTIVE = "directive"


@dataclass(frozen=True)
class Property:
    """A single vocabulary entry.

    Attributes:
        name: CSS spelling (e.g. "max-width", "@font-face")
        kind: Declaration or directive
    """

    name: str
    kind: PropertyKind

    @property
    def method_name(self) -> str:
        """Python attribute name the renderer exposes for this entry."""
        return method_name_for(self.name)

    @property
    def is_directive(self) -> bool:
        return self.kind is PropertyKind.DIRECTIVE


def method_name_for(name: str) -> str:
    """Convert a CSS name to its renderer method name."""
    return name.removeprefix(DIRECTIVE_MARKER).replace("-", "_")


def property_name(method_name: str) -> str:
    """Convert a method name that is not in the vocabulary to a CSS name.

    Used for fallback declarations: ``grid_gap`` -> ``grid-gap``.
    """
    return method_name.replace("_", "-")


def _build_vocabulary(names: tuple[str, ...]) -> MappingProxyType[str, Property]:
    table: dict[str, Property] = {}
    for name in names:
        kind = (
            PropertyKind.DIRECTIVE
            if name.startswith(DIRECTIVE_MARKER)
            else PropertyKind.DECLARATION
        )
        prop = Property(name=name, kind=kind)
        if prop.method_name in table:
            raise ValueError(
                f"Duplicate vocabulary method name: {prop.method_name} "
                f"({table[prop.method_name].name!r} and {name!r})"
            )
        table[prop.method_name] = prop
    return MappingProxyType(table)


VOCABULARY = _build_vocabulary(CSS_PROPERTIES)


def lookup(method_name: str) -> Property | None:
    """Find the vocabulary entry for a method name.

    Args:
        method_name: Attribute name used on the renderer

    Returns:
        Matching Property, or None if the name is not in the vocabulary
    """
    return VOCABULARY.get(method_name)
