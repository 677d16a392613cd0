"""Tests for filename filter parsing and the filter gate."""
from stampkit.models.template import TemplateFileDescriptor
from stampkit.templating.filters import (
    enabled_filters,
    filter_file,
    is_usable,
    parse_filter_name,
    template_is_usable,
)


class TestParseFilterName:
    """Test extracting (tag) groups from template paths."""

    def test_groups_in_directory_name(self):
        """Groups are removed from the path and collected in order."""
        assert parse_filter_name("foo(bar)(baz)/qux.txt") == ("foo/qux.txt", ["bar", "baz"])

    def test_no_groups(self):
        assert parse_filter_name("src/app.py") == ("src/app.py", [])

    def test_groups_anywhere(self):
        """Groups may appear in any path segment."""
        assert parse_filter_name("(api)src/(db)models.py") == ("src/models.py", ["api", "db"])

    def test_duplicate_tags_kept(self):
        assert parse_filter_name("(a)x(a).txt") == ("x.txt", ["a", "a"])

    def test_empty_parentheses_ignored(self):
        """Empty groups are not filters."""
        assert parse_filter_name("()x.txt") == ("()x.txt", [])

    def test_filter_file_descriptor(self):
        descriptor = filter_file("(docker)Dockerfile")

        assert descriptor == TemplateFileDescriptor(
            raw_name="(docker)Dockerfile",
            resolved_name="Dockerfile",
            filters=["docker"],
        )


class TestFilterGate:
    """Test deciding whether a filtered file is emitted."""

    def test_enabled_filters(self):
        assert enabled_filters({"a": True, "b": False, "c": True}) == {"a", "c"}

    def test_enabled_filters_none(self):
        assert enabled_filters(None) == set()

    def test_unfiltered_always_usable(self):
        assert is_usable([], set())

    def test_single_enabled_filter(self):
        assert is_usable(["a"], enabled_filters({"a": True}))

    def test_partially_enabled_filters(self):
        """Every tag must be enabled."""
        assert not is_usable(["a", "b"], enabled_filters({"a": True}))

    def test_disabled_filter(self):
        assert not is_usable(["a"], enabled_filters({"a": False}))

    def test_repeated_tag_needs_only_presence(self):
        assert is_usable(["a", "a"], {"a"})

    def test_template_is_usable(self):
        descriptor = filter_file("(ci)(docker)pipeline.yml")

        assert template_is_usable(descriptor, {"ci": True, "docker": True})
        assert not template_is_usable(descriptor, {"ci": True})
        assert not template_is_usable(descriptor, None)
