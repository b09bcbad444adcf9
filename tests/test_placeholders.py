"""Tests for crossing.placeholders — syntaxes, extraction, compilation."""

import re

import pytest

from crossing.errors import ConfigurationError
from crossing.placeholders import (
    ANGLE,
    BRACE,
    COLON,
    SYNTAXES,
    Placeholder,
    PlaceholderSyntax,
    compile_template,
    find_placeholders,
)


class TestSyntaxes:
    def test_all_syntaxes_registered(self) -> None:
        assert set(SYNTAXES) == {"angle", "colon", "brace"}

    def test_registry_maps_to_constants(self) -> None:
        assert SYNTAXES["angle"] is ANGLE
        assert SYNTAXES["colon"] is COLON
        assert SYNTAXES["brace"] is BRACE

    def test_from_regex_string(self) -> None:
        syntax = PlaceholderSyntax.from_regex(r"\[([a-z]+)\]", name="square")
        assert syntax.name == "square"
        assert syntax.pattern.pattern == r"\[([a-z]+)\]"

    def test_from_compiled_pattern(self) -> None:
        pattern = re.compile(r"\$([a-z]+)")
        syntax = PlaceholderSyntax.from_regex(pattern)
        assert syntax.pattern is pattern
        assert syntax.name == "custom"

    def test_rejects_no_group(self) -> None:
        with pytest.raises(ConfigurationError, match="exactly one capturing group"):
            PlaceholderSyntax.from_regex(r"<[a-z]+>")

    def test_rejects_two_groups(self) -> None:
        with pytest.raises(ConfigurationError, match="exactly one capturing group"):
            PlaceholderSyntax.from_regex(r"<([a-z]+):([a-z]+)>")

    def test_rejects_invalid_regex(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid placeholder regex"):
            PlaceholderSyntax.from_regex(r"<([a-z]+>")

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ANGLE.name = "other"  # type: ignore[misc]


class TestFindPlaceholders:
    def test_none(self) -> None:
        assert find_placeholders("search/") == ()

    def test_order_and_offsets(self) -> None:
        found = find_placeholders("<team_slug>/<slug>/")
        assert found == (
            Placeholder("team_slug", "<team_slug>", 0, 11),
            Placeholder("slug", "<slug>", 12, 18),
        )

    def test_identifier_characters(self) -> None:
        found = find_placeholders("<a-B_9>/")
        assert [p.name for p in found] == ["a-B_9"]

    def test_rejects_empty_identifier(self) -> None:
        assert find_placeholders("<>/") == ()

    def test_duplicates_kept(self) -> None:
        found = find_placeholders("<slug>/<slug>/")
        assert [p.name for p in found] == ["slug", "slug"]

    def test_colon_syntax(self) -> None:
        found = find_placeholders("/task/edit/:task_id/", COLON)
        assert [(p.name, p.token) for p in found] == [("task_id", ":task_id")]

    def test_brace_syntax(self) -> None:
        found = find_placeholders("/users/{user_id}/", BRACE)
        assert [(p.name, p.token) for p in found] == [("user_id", "{user_id}")]

    def test_repeated_calls_restart(self) -> None:
        template = "<team_slug>/<discussion_id>/<slug>/"
        first = find_placeholders(template)
        second = find_placeholders(template)
        assert first == second
        assert len(second) == 3


class TestCompileTemplate:
    def test_captures_in_order(self) -> None:
        matcher = compile_template("<team_slug>/<discussion_id>/<slug>/")
        match = matcher.match("test/test2/test-3/")
        assert match is not None
        assert match.groups() == ("test", "test2", "test-3")

    def test_anchored_start(self) -> None:
        matcher = compile_template("search/")
        assert matcher.match("xsearch/") is None

    def test_anchored_end(self) -> None:
        matcher = compile_template("search/")
        assert matcher.match("search/more") is None
        assert matcher.match("search/\n") is None

    def test_allows_empty_segment(self) -> None:
        matcher = compile_template("<team_slug>/<slug>/")
        match = matcher.match("/x/")
        assert match is not None
        assert match.groups() == ("", "x")

    def test_value_excludes_slash(self) -> None:
        matcher = compile_template("<slug>/")
        assert matcher.match("a/b/") is None

    def test_literal_text_escaped(self) -> None:
        matcher = compile_template("/feed.<fmt>")
        assert matcher.match("/feed.rss") is not None
        assert matcher.match("/feedxrss") is None

    def test_exact_trailing_slash(self) -> None:
        matcher = compile_template("search/")
        assert matcher.match("search") is None

    def test_tolerant_trailing_slash(self) -> None:
        matcher = compile_template("search/", trailing_slash=True)
        assert matcher.match("search") is not None
        assert matcher.match("search/") is not None
        assert matcher.match("search//") is None

    def test_tolerant_without_slash_in_template(self) -> None:
        matcher = compile_template("<slug>", trailing_slash=True)
        match = matcher.match("loop/")
        assert match is not None
        assert match.groups() == ("loop",)

    def test_uses_given_placeholders(self) -> None:
        syntax = PlaceholderSyntax.from_regex(r":([a-z_]+)(?=/)")
        template = "/task/:task_id/"
        found = find_placeholders(template, syntax)
        matcher = compile_template(template, syntax, trailing_slash=True, placeholders=found)
        assert matcher.groups == len(found) == 1
        match = matcher.match("/task/7")
        assert match is not None
        assert match.groups() == ("7",)

    def test_colon_syntax(self) -> None:
        matcher = compile_template("/task/edit/:task_id/", COLON)
        match = matcher.match("/task/edit/42/")
        assert match is not None
        assert match.groups() == ("42",)
