"""Tests for component and prop name derivation."""

import pytest

from mistcss.schema.naming import (
    base_name,
    camel_case,
    component_name,
    is_valid_prop,
    pascal_case,
)


class TestCase:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("disabled", "disabled"),
            ("full-width", "fullWidth"),
            ("is_open", "isOpen"),
            ("text-align", "textAlign"),
        ],
    )
    def test_camel_case(self, token, expected):
        assert camel_case(token) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [("button", "Button"), ("icon-button", "IconButton"), ("nav_bar", "NavBar")],
    )
    def test_pascal_case(self, text, expected):
        assert pascal_case(text) == expected


class TestFileNames:
    def test_base_name_strips_dialect_suffix(self):
        assert base_name("src/ui/card.mist.css") == "card"

    def test_base_name_windows_separators(self):
        assert base_name("src\\ui\\card.mist.css") == "card"

    def test_component_name(self):
        assert component_name("components/icon-button.mist.css") == "IconButton"

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("2col.mist.css", "Mist2col"),
            ("404-page.mist.css", "Mist404Page"),
            ("card@2x.mist.css", "Card2x"),
        ],
    )
    def test_component_name_is_a_valid_identifier(self, path, expected):
        assert component_name(path) == expected


class TestPropValidity:
    @pytest.mark.parametrize("name", ["color", "fullWidth", "_x", "$store"])
    def test_valid(self, name):
        assert is_valid_prop(name)

    @pytest.mark.parametrize(
        "name", ["", "2xl", "children", "className", "key", "ref", "default", "new"]
    )
    def test_invalid(self, name):
        assert not is_valid_prop(name)
