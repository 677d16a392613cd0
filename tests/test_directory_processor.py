"""Tests for template directory processing."""
import pytest

from stampkit.core.config import StampSettings
from stampkit.models.template import FileAction
from stampkit.templating.directory import DirectoryProcessor, process_directory


class TestProcessDirectory:
    """Test filtering and copy/template dispatch."""

    def test_dispatches_each_file(self, recording_host):
        """Files are templated, copied or skipped according to name and filters."""
        host = recording_host([
            "README.md",
            "(docker)Dockerfile",
            "src/name.py",
            "_gitignore",
            "!logo.png",
            "(ci)(docker).github/workflow.yml",
        ], name="demo")

        results = process_directory(host, "app", "out", {"docker": True, "ci": False})

        assert host.calls == [
            ("template", "/templates/app/README.md", "out/README.md"),
            ("template", "/templates/app/(docker)Dockerfile", "out/Dockerfile"),
            ("template", "/templates/app/src/name.py", "out/src/demo.py"),
            ("template", "/templates/app/_gitignore", "out/gitignore"),
            ("copy", "/templates/app/!logo.png", "out/logo.png"),
        ]
        assert [r.action for r in results] == [
            FileAction.TEMPLATE,
            FileAction.TEMPLATE,
            FileAction.TEMPLATE,
            FileAction.TEMPLATE,
            FileAction.COPY,
            FileAction.SKIP,
        ]
        assert results[-1].descriptor.filters == ["ci", "docker"]

    def test_enumerates_with_dot_files(self, recording_host):
        """Every file under the resolved root is requested, dot-files included."""
        host = recording_host([])

        process_directory(host, "app", "out")

        assert host.expand_args == ("**", True, "/templates/app")

    def test_absolute_source_used_as_is(self, recording_host):
        host = recording_host(["a.txt"])

        process_directory(host, "/elsewhere/tpl", "out")

        assert host.expand_args[2] == "/elsewhere/tpl"
        assert host.calls == [("template", "/elsewhere/tpl/a.txt", "out/a.txt")]

    def test_no_filters_configured(self, recording_host):
        """Without a filter configuration only unfiltered files are written."""
        host = recording_host(["a.txt", "(x)b.txt"])

        results = process_directory(host, "app", "out")

        assert [r.written for r in results] == [True, False]
        assert len(host.calls) == 1

    def test_name_not_substituted_without_project_name(self, recording_host):
        host = recording_host(["name.txt"])

        process_directory(host, "app", "out")

        assert host.calls[0][2] == "out/name.txt"

    def test_name_replaced_once_anywhere(self, recording_host):
        """The first 'name' substring is replaced, even inside other words."""
        host = recording_host(["filename.txt", "name/name.txt"], name="demo")

        process_directory(host, "app", "out")

        assert [call[2] for call in host.calls] == ["out/filedemo.txt", "out/demo/name.txt"]

    def test_filters_checked_before_substitution(self, recording_host):
        """A tag spelled like the placeholder is still matched as written."""
        host = recording_host(["(name)x.txt"], name="demo")

        results = process_directory(host, "app", "out", {"name": True})

        assert results[0].action is FileAction.TEMPLATE
        assert host.calls[0][2] == "out/x.txt"

    def test_host_errors_propagate(self, recording_host):
        """Failures from the host are not swallowed."""
        host = recording_host(["a.txt"])

        def _fail(src, dest):
            raise PermissionError(dest)

        host.template = _fail

        with pytest.raises(PermissionError):
            process_directory(host, "app", "out")

    def test_custom_settings(self, recording_host):
        """Marker characters and placeholder come from settings."""
        host = recording_host(["~=PROJECT.txt"], name="demo")
        settings = StampSettings(hidden_marker="~", copy_marker="=", name_placeholder="PROJECT")

        DirectoryProcessor(host, settings=settings).process("app", "out")

        assert host.calls == [("copy", "/templates/app/~=PROJECT.txt", "out/demo.txt")]
