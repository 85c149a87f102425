import pytest

from app.posting.template import render


class StubResolver:
    def __init__(self, values):
        self.values = values

    def resolve(self, name):
        return self.values.get(name)


@pytest.fixture
def resolver():
    return StubResolver({"title": "Hello", "image": None})


@pytest.mark.parametrize("template", ["", "plain text", "100 percent", "a % b"])
def test_text_without_tokens_is_unchanged(template, resolver):
    assert render(template, resolver) == template


def test_double_percent_is_literal(resolver):
    assert render("%%", resolver) == "%"
    assert render("50%% off %title%", resolver) == "50% off Hello"


def test_known_variable(resolver):
    assert render("%title%", resolver) == "Hello"


def test_unknown_and_empty_variables_render_empty(resolver):
    assert render("[%unknown%]", resolver) == "[]"
    assert render("[%image%]", resolver) == "[]"


def test_tokens_are_matched_left_to_right(resolver):
    assert render("%title%title%", resolver) == "Hellotitle%"
    assert render("100% sure %title%", resolver) == "100% sure Hello"
