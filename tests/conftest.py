"""Shared test fixtures for stampkit tests."""
import os
from typing import List, Optional

import pytest

from stampkit.core.config import set_settings
from stampkit.templating.host import GeneratorHost


class RecordingHost(GeneratorHost):
    """In-memory generator host that records copy/template calls."""

    def __init__(self, files: List[str], name: Optional[str] = None, root: str = "/templates"):
        self.files = list(files)
        self.name = name
        self.root = root
        self.calls = []
        self.expand_args = None

    def source_root(self) -> str:
        return self.root

    def is_path_absolute(self, path: str) -> bool:
        return os.path.isabs(path)

    def expand_files(self, pattern, dot=False, cwd=None):
        self.expand_args = (pattern, dot, cwd)
        return list(self.files)

    def copy(self, src, dest):
        self.calls.append(("copy", src, dest))

    def template(self, src, dest):
        self.calls.append(("template", src, dest))


@pytest.fixture(autouse=True)
def reset_settings():
    """Make every test start from environment-derived settings."""
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def recording_host():
    """Factory for RecordingHost instances."""
    def _make(files, name=None, root="/templates"):
        return RecordingHost(files, name=name, root=root)
    return _make


@pytest.fixture
def template_tree(tmp_path):
    """Create a small template tree under tmp_path/templates/app."""
    root = tmp_path / "templates" / "app"
    files = {
        "README.md": "# {{ name }}\n",
        "(docker)Dockerfile": "FROM python:3.12\n",
        ".env": "PROJECT={{ name }}\n",
        "!raw.txt": "{{ left alone }}\n",
        "_gitignore": "*.pyc\n",
        "src/name/main.py": "VERSION = '{{ version | default('0.0.1') }}'\n",
        "(ci)(docker)ci/pipeline.yml": "stages: [build]\n",
    }
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root
