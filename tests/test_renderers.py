"""Tests for renderer resolution and the built-in renderers."""

from __future__ import annotations

import logging

import pytest

from mathspan import MathspanConfig, PluginError
from mathspan.registry import StaticComponentRegistry, component_registry_context
from mathspan.renderers import (
    custom_element_renderer,
    default_renderer,
    normalize_custom_element,
    resolve_renderer,
)


class TestNormalizeCustomElement:
    @pytest.mark.parametrize(
        ("option", "expected"),
        [
            ("my-el", ("my-el", {})),
            (("my-el",), ("my-el", {})),
            (["my-el"], ("my-el", {})),
            (("my-el", None), ("my-el", {})),
            (("my-el", {"class": "bar"}), ("my-el", {"class": "bar"})),
            (["my-el", {"data-n": 3}], ("my-el", {"data-n": "3"})),
        ],
    )
    def test_accepted_shapes(self, option: object, expected: tuple[str, dict[str, str]]) -> None:
        assert normalize_custom_element(option) == expected  # type: ignore[arg-type]

    def test_rejected_shape_names_plugin(self) -> None:
        with pytest.raises(PluginError) as excinfo:
            normalize_custom_element({"tag": "my-el"})  # type: ignore[arg-type]
        assert excinfo.value.plugin_name == "mathspan"


class TestCustomElementRenderer:
    def test_escapes_at_build_and_render_time(self) -> None:
        calls: list[str] = []

        def escape(text: str) -> str:
            calls.append(text)
            return text.upper()

        render = custom_element_renderer(("my-el", {"title": "t"}), escape)
        assert calls == ["t"]

        assert render("a") == '<my-el title="T">A</my-el>'
        assert render("b") == '<my-el title="T">B</my-el>'
        assert calls == ["t", "a", "b"]

    def test_token_and_context_are_optional(self) -> None:
        render = custom_element_renderer("my-el")
        assert render("x", None, None) == render("x")


class TestDefaultRenderer:
    def test_generic_span_without_registry(self) -> None:
        assert default_renderer()("x") == '<span class="math inline">x</span>'

    def test_explicit_registry(self) -> None:
        render = default_renderer(registry=StaticComponentRegistry({"la-tex"}))
        assert render("x") == "<la-tex>x</la-tex>"

    def test_context_registry(self) -> None:
        with component_registry_context(StaticComponentRegistry({"math-up"})):
            render = default_renderer()
        assert render("x") == "<math-up>x</math-up>"


class TestResolveRenderer:
    def test_renderer_used_verbatim(self) -> None:
        def renderer(content, token=None, context=None):
            return content

        assert resolve_renderer(MathspanConfig(renderer=renderer)) is renderer

    def test_custom_element_before_default(self) -> None:
        config = MathspanConfig(
            custom_element="my-el",
            component_registry=StaticComponentRegistry({"math-up"}),
        )
        assert resolve_renderer(config)("<") == "<my-el>&lt;</my-el>"

    def test_default(self) -> None:
        assert resolve_renderer(MathspanConfig())("&") == '<span class="math inline">&amp;</span>'

    def test_logs_choice(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mathspan"):
            resolve_renderer(MathspanConfig(component_registry=StaticComponentRegistry({"la-tex"})))
        assert any("la-tex" in record.getMessage() for record in caplog.records)
        assert all(record.name.startswith("mathspan.") for record in caplog.records)
