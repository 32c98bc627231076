import pytest

from sanicview.exceptions import UnsupportedEngineError, TemplateRenderError
from sanicview.view import (
    EngineKind,
    DynamicTemplateStrategy,
    StaticMarkupStrategy,
    build_context,
    strategy_for,
)


def test_engine_kind_parse():
    assert EngineKind.parse("ejs") is EngineKind.EJS
    assert EngineKind.parse("HTML") is EngineKind.HTML
    assert EngineKind.parse(EngineKind.JINJA) is EngineKind.JINJA

    with pytest.raises(UnsupportedEngineError):
        EngineKind.parse("handlebars")


def test_engine_kind_extension():
    assert EngineKind.EJS.extension == ".ejs"
    assert EngineKind.HTML.extension == ".html"
    assert EngineKind.JINJA.extension == ".jinja"


def test_strategy_for_each_kind():
    assert isinstance(strategy_for("html"), StaticMarkupStrategy)
    assert strategy_for("ejs").kind is EngineKind.EJS
    assert strategy_for(EngineKind.JINJA).kind is EngineKind.JINJA
    assert isinstance(strategy_for("jinja"), DynamicTemplateStrategy)

    with pytest.raises(UnsupportedEngineError):
        strategy_for("mustache")


def test_ejs_output_is_escaped_unless_marked_safe():
    strategy = DynamicTemplateStrategy(EngineKind.EJS)

    escaped = strategy.render_source("<%= body %>", {"body": "<b>hi</b>"})
    raw = strategy.render_source("<%= body|safe %>", {"body": "<b>hi</b>"})

    assert escaped == "&lt;b&gt;hi&lt;/b&gt;"
    assert raw == "<b>hi</b>"


def test_ejs_unescaped_tag_is_not_supported():
    strategy = DynamicTemplateStrategy(EngineKind.EJS)

    with pytest.raises(TemplateRenderError):
        strategy.render_source("<%- body %>", {"body": "<b>hi</b>"})


def test_ejs_comments_are_dropped():
    strategy = DynamicTemplateStrategy(EngineKind.EJS)

    assert strategy.render_source("a<%# note %>b", {}) == "ab"


def test_ejs_delimiters_leave_jinja_syntax_alone():
    strategy = DynamicTemplateStrategy(EngineKind.EJS)

    assert strategy.render_source("{{ name }}", {"name": "Ada"}) == "{{ name }}"


def test_dynamic_render_error_names_template():
    strategy = DynamicTemplateStrategy(EngineKind.EJS)

    with pytest.raises(TemplateRenderError) as exc_info:
        strategy.render_source("<%= missing %>", {}, name="home")

    assert exc_info.value.template == "home"


def test_static_substitution_is_single_pass():
    strategy = StaticMarkupStrategy()

    result = strategy.render_source("{{ a }}", {"a": "{{ b }}", "b": "X"})

    assert result == "{{ b }}"


def test_static_substitution_handles_regex_characters_in_keys():
    strategy = StaticMarkupStrategy()

    result = strategy.render_source("{{ a.b }} {{ a+b }}", {"a.b": 1, "a+b": 2})

    assert result == "1 2"


def test_static_substitution_does_not_escape():
    strategy = StaticMarkupStrategy()

    assert strategy.render_source("{{ x }}", {"x": "<i>y</i>"}) == "<i>y</i>"


def test_build_context_copies_data():
    data = {"name": "Ada"}

    context = build_context(data)
    context["name"] = "Grace"

    assert data == {"name": "Ada"}
    assert build_context(None) == {}


def test_build_context_rejects_non_string_keys():
    with pytest.raises(TemplateRenderError):
        build_context({1: "one"}, template="page")
