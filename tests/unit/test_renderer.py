"""Unit tests for the stylesheet renderer."""

import pytest

from py2sass import Renderer, RendererFinalizedError, SelectorContext, stylesheet


class TestDeclarations:
    """Tests for plain and fallback declarations."""

    def test_basic_properties(self) -> None:
        """Test vocabulary properties inside a rule block."""

        def body(r: Renderer) -> None:
            def container(r: Renderer) -> None:
                r.width("100%")
                r.max_width("1200px")
                r.margin("0 auto")

            r.s(".container", container)

        expected = (
            ".container {\n"
            "  width: 100%;\n"
            "  max-width: 1200px;\n"
            "  margin: 0 auto;\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_fallback_property_translates_underscores(self) -> None:
        """Test that names outside the vocabulary still render as declarations."""
        r = Renderer()
        r.grid_gap("1rem")
        r.webkit_font_smoothing("antialiased")

        assert r.to_sass() == "grid-gap: 1rem;\nwebkit-font-smoothing: antialiased;\n"

    def test_declare_uses_name_verbatim(self) -> None:
        """Test the generic declare entry point."""
        r = Renderer()
        r.declare("--brand_color", "#ff0")

        assert r.to_sass() == "--brand_color: #ff0;\n"

    def test_values_are_stringified(self) -> None:
        """Test non-string values."""
        r = Renderer()
        r.opacity(0.5)
        r.z_index(10)

        assert r.to_sass() == "opacity: 0.5;\nz-index: 10;\n"

    def test_private_names_are_not_dispatched(self) -> None:
        """Test that underscore-prefixed attributes raise AttributeError."""
        r = Renderer()

        with pytest.raises(AttributeError):
            r._not_a_property  # noqa: B018
        assert not hasattr(r, "__missing__")

    def test_vendor_prefixed_properties_use_declare(self) -> None:
        """Test that vendor prefixes go through declare, not attribute dispatch."""
        r = Renderer()

        with pytest.raises(AttributeError):
            r._webkit_font_smoothing  # noqa: B018
        r.declare("-webkit-font-smoothing", "antialiased")

        assert r.to_sass() == "-webkit-font-smoothing: antialiased;\n"


class TestBlocks:
    """Tests for nested block constructs."""

    def test_nested_selectors_with_context(self) -> None:
        """Test pseudo-class blocks through a SelectorContext."""

        def body(r: Renderer) -> None:
            def parent(p: SelectorContext) -> None:
                r.color("black")
                p.child(lambda r: r.color("blue"))

            r.s_with_context(".parent", parent)

        expected = (
            ".parent {\n"
            "  color: black;\n"
            "  &:child {\n"
            "    color: blue;\n"
            "  }\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_selector_context_hover(self) -> None:
        """Test that an unknown name on the context becomes &:<name>."""
        r = Renderer()
        r.rule_with_context("a", lambda ctx: ctx.hover(lambda r: r.text_decoration("underline")))

        assert r.to_sass() == (
            "a {\n"
            "  &:hover {\n"
            "    text-decoration: underline;\n"
            "  }\n"
            "}\n"
        )

    def test_selector_context_hyphenates_names(self) -> None:
        """Test multi-word pseudo-classes."""
        r = Renderer()
        r.s_with_context("li", lambda ctx: ctx.first_child())

        assert "  &:first-child {\n" in r.to_sass()

    def test_selector_context_has_no_buffer(self) -> None:
        """Test that the context writes through to its parent."""
        r = Renderer()
        ctx = SelectorContext(r)
        ctx.focus()

        assert ctx.renderer is r
        assert r.to_sass() == "&:focus {\n}\n"

    def test_empty_blocks_open_and_close(self) -> None:
        """Test that a missing body still emits the construct."""
        r = Renderer()
        r.s(".a", lambda r: r.s(".b"))
        r.media("print")

        assert r.to_sass() == ".a {\n  .b {\n  }\n}\n@media print {\n}\n"
        assert r.indentation == 0

    def test_indentation_restored_when_body_raises(self) -> None:
        """Test that indentation unwinds even when a nested body fails."""
        r = Renderer()

        def fail(r: Renderer) -> None:
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            r.s(".outer", lambda r: r.s(".inner", fail))

        assert r.indentation == 0

    def test_media_queries(self) -> None:
        """Test @media blocks."""

        def body(r: Renderer) -> None:
            r.media(
                "screen and (max-width: 600px)",
                body=lambda r: r.s(".container", lambda r: r.width("100%")),
            )

        expected = (
            "@media screen and (max-width: 600px) {\n"
            "  .container {\n"
            "    width: 100%;\n"
            "  }\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_keyframes(self) -> None:
        """Test @keyframes blocks."""

        def fade_in(r: Renderer) -> None:
            r.s("from", lambda r: r.opacity("0"))
            r.s("to", lambda r: r.opacity("1"))

        r = Renderer(lambda r: r.keyframes("fadeIn", fade_in))

        assert r.to_sass() == (
            "@keyframes fadeIn {\n"
            "  from {\n"
            "    opacity: 0;\n"
            "  }\n"
            "  to {\n"
            "    opacity: 1;\n"
            "  }\n"
            "}\n"
        )

    def test_vocabulary_directive(self) -> None:
        """Test directives reached through the vocabulary."""
        r = Renderer()
        r.font_face(body=lambda r: r.font_family("'Inter'"))
        r.supports("(display: grid)", body=lambda r: r.s(".grid", lambda r: r.display("grid")))

        assert r.to_sass() == (
            "@font-face {\n"
            "  font-family: 'Inter';\n"
            "}\n"
            "@supports (display: grid) {\n"
            "  .grid {\n"
            "    display: grid;\n"
            "  }\n"
            "}\n"
        )

    def test_directive_adds_marker(self) -> None:
        """Test the generic directive entry point."""
        r = Renderer()
        r.directive("layer", "base")

        assert r.to_sass() == "@layer base {\n}\n"

    def test_positional_body_after_variadic_arguments(self) -> None:
        """Test that a trailing callable runs as the block body."""
        r = Renderer()
        r.media("print", lambda r: r.color("black"))
        r.font_face(lambda r: r.font_family("'Inter'"))
        r.mixin("rounded", "$radius", lambda r: r.border_radius("$radius"))
        r.function("double", "$n", lambda r: r.return_("$n * 2"))

        assert r.to_sass() == (
            "@media print {\n"
            "  color: black;\n"
            "}\n"
            "@font-face {\n"
            "  font-family: 'Inter';\n"
            "}\n"
            "@mixin rounded($radius) {\n"
            "  border-radius: $radius;\n"
            "}\n"
            "@function double($n) {\n"
            "  @return $n * 2;\n"
            "}\n"
        )

    def test_mixin_positional_body_without_params(self) -> None:
        """Test a positional body on a parameterless mixin."""
        r = Renderer()
        r.mixin("m", lambda r: r.display("block"))

        assert r.to_sass() == "@mixin m {\n  display: block;\n}\n"

    def test_callable_before_last_argument_rejected(self) -> None:
        """Test that a callable in the middle of the prelude raises."""
        r = Renderer()

        with pytest.raises(TypeError, match="Block body must be the last argument"):
            r.media(lambda r: None, "print")
        with pytest.raises(TypeError, match="Block body must be the last argument"):
            r.mixin("m", lambda r: None, body=lambda r: None)
        assert r.indentation == 0
        assert r.to_sass() == ""


class TestSassFeatures:
    """Tests for mixins, variables, control flow and functions."""

    def test_mixins_and_includes(self) -> None:
        """Test @mixin with parameters and @include with arguments."""

        def body(r: Renderer) -> None:
            def button_styles(r: Renderer) -> None:
                r.background_color("$bg-color")
                r.padding("10px 15px")
                r.border_radius("5px")

            r.mixin("button-styles", "$bg-color", body=button_styles)
            r.s(".button", lambda r: r.include("button-styles", "#007bff"))

        expected = (
            "@mixin button-styles($bg-color) {\n"
            "  background-color: $bg-color;\n"
            "  padding: 10px 15px;\n"
            "  border-radius: 5px;\n"
            "}\n"
            ".button {\n"
            "  @include button-styles(#007bff);\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_include_without_arguments(self) -> None:
        """Test that empty argument lists drop the parentheses."""
        r = Renderer()
        r.mixin("clearfix")
        r.include("clearfix")

        assert r.to_sass() == "@mixin clearfix {\n}\n@include clearfix;\n"

    def test_variables(self) -> None:
        """Test that v() writes the declaration and returns the reference."""

        def body(r: Renderer) -> None:
            my_var = r.v("primary_color", "#007bff")
            r.s(".button", lambda r: r.background_color(my_var))

        r = Renderer(body)
        expected = (
            "$primary_color: #007bff;\n"
            ".button {\n"
            "  background-color: $primary_color;\n"
            "}\n"
        )
        assert r.to_sass() == expected
        assert r.variables == {"primary_color": "$primary_color"}

    def test_imports(self) -> None:
        """Test @import statements."""

        def body(r: Renderer) -> None:
            r.import_("variables")
            r.import_("mixins")

        assert Renderer(body).to_sass() == "@import 'variables';\n@import 'mixins';\n"

    def test_extends(self) -> None:
        """Test @extend inside a rule."""

        def button(r: Renderer) -> None:
            r.extend(".base-button")
            r.background_color("blue")

        r = Renderer(lambda r: r.s(".button", button))

        assert r.to_sass() == (
            ".button {\n"
            "  @extend .base-button;\n"
            "  background-color: blue;\n"
            "}\n"
        )

    def test_if_statements(self) -> None:
        """Test @if / @else with a variable reference."""

        def body(r: Renderer) -> None:
            theme = r.v("theme", "dark")

            def dark(r: Renderer) -> None:
                r.background_color("black")
                r.color("white")

            def light(r: Renderer) -> None:
                r.background_color("white")
                r.color("black")

            r.if_statement(f"{theme} == dark", lambda r: r.s("body", dark))
            r.else_statement(lambda r: r.s("body", light))

        expected = (
            "$theme: dark;\n"
            "@if $theme == dark {\n"
            "  body {\n"
            "    background-color: black;\n"
            "    color: white;\n"
            "  }\n"
            "}\n"
            "@else {\n"
            "  body {\n"
            "    background-color: white;\n"
            "    color: black;\n"
            "  }\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_else_if_statement(self) -> None:
        """Test @else if blocks."""
        r = Renderer()
        r.if_statement("$size == small", lambda r: r.font_size("12px"))
        r.else_if_statement("$size == large", lambda r: r.font_size("20px"))

        assert "@else if $size == large {\n  font-size: 20px;\n}\n" in r.to_sass()

    def test_for_loops(self) -> None:
        """Test @for with inclusive bounds."""

        def body(r: Renderer) -> None:
            r.for_loop(
                "i",
                from_=1,
                to=3,
                body=lambda r: r.s(".col-#{$i}", lambda r: r.width("#{$i * 25}%")),
            )

        expected = (
            "@for $i from 1 through 3 {\n"
            "  .col-#{$i} {\n"
            "    width: #{$i * 25}%;\n"
            "  }\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_each_loops(self) -> None:
        """Test @each with list text."""

        def body(r: Renderer) -> None:
            r.each_loop(
                "color",
                "red, green, blue",
                lambda r: r.s(".#{$color}", lambda r: r.background_color("$color")),
            )

        expected = (
            "@each $color in red, green, blue {\n"
            "  .#{$color} {\n"
            "    background-color: $color;\n"
            "  }\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_each_loop_joins_sequences(self) -> None:
        """Test @each with a Python list."""
        r = Renderer()
        r.each_loop("size", ["sm", "md", "lg"])

        assert r.to_sass() == "@each $size in sm, md, lg {\n}\n"

    def test_while_loops_with_raw(self) -> None:
        """Test @while where the decrement is written with raw()."""

        def body(r: Renderer) -> None:
            i = r.v("i", 6)

            def loop(r: Renderer) -> None:
                r.s(".item-#{$i}", lambda r: r.width("#{$i * 2}em"))
                r.raw("$i: $i - 2;\n")

            r.while_loop(f"{i} > 0", loop)

        expected = (
            "$i: 6;\n"
            "@while $i > 0 {\n"
            "  .item-#{$i} {\n"
            "    width: #{$i * 2}em;\n"
            "  }\n"
            "$i: $i - 2;\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_functions(self) -> None:
        """Test @function with @return."""

        def body(r: Renderer) -> None:
            r.function("double", "$n", body=lambda r: r.return_("$n * 2"))
            r.s(".element", lambda r: r.width("double(5px)"))

        expected = (
            "@function double($n) {\n"
            "  @return $n * 2;\n"
            "}\n"
            ".element {\n"
            "  width: double(5px);\n"
            "}\n"
        )
        assert Renderer(body).to_sass() == expected

    def test_raw_input(self) -> None:
        """Test raw SCSS passthrough."""
        raw = ".custom-class {\n  display: flex;\n  align-items: center;\n}\n"
        r = Renderer(lambda r: r.s(".wrap", lambda r: r.raw(raw)))

        # raw text is not re-indented, even inside a block
        assert r.to_sass() == ".wrap {\n" + raw + "}\n"


class TestFinalization:
    """Tests for to_sass() caching and lifecycle."""

    def test_to_sass_is_idempotent(self) -> None:
        """Test that the body runs once and the text is cached."""
        calls: list[int] = []

        def body(r: Renderer) -> None:
            calls.append(1)
            r.color("red")

        r = Renderer(body)
        first = r.to_sass()
        second = r.to_sass()

        assert first == second == "color: red;\n"
        assert calls == [1]
        assert str(r) == first
        assert r.finalized

    def test_write_after_finalize_raises(self) -> None:
        """Test that the finalized buffer can't change."""
        r = Renderer(lambda r: r.color("red"))
        r.to_sass()

        with pytest.raises(RendererFinalizedError):
            r.color("blue")
        with pytest.raises(RendererFinalizedError):
            r.raw("x")
        assert r.to_sass() == "color: red;\n"

    def test_failed_body_leaves_no_partial_output(self) -> None:
        """Test that a failing body discards what it wrote."""
        attempts: list[int] = []

        def body(r: Renderer) -> None:
            attempts.append(1)
            r.v("x", 1)
            r.color("red")
            if len(attempts) == 1:
                raise ValueError("first attempt fails")

        r = Renderer(body)
        with pytest.raises(ValueError):
            r.to_sass()

        assert not r.finalized
        assert r.to_sass() == "$x: 1;\ncolor: red;\n"
        assert r.variables == {"x": "$x"}

    def test_reentrant_to_sass_raises(self) -> None:
        """Test that the body can't finalize its own renderer."""
        r = Renderer(lambda r: r.to_sass())

        with pytest.raises(RuntimeError, match="while the stylesheet body is running"):
            r.to_sass()

    def test_empty_renderer(self) -> None:
        """Test a renderer with no body."""
        assert Renderer().to_sass() == ""

    def test_stylesheet_decorator(self) -> None:
        """Test wrapping a function into a Renderer."""

        @stylesheet
        def theme(r: Renderer) -> None:
            r.s("body", lambda r: r.margin(0))

        assert isinstance(theme, Renderer)
        assert theme.to_sass() == "body {\n  margin: 0;\n}\n"
