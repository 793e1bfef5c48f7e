# tests/test_packaging.py
"""Installed modules only pull in core dependencies; the Streamlit stack is an extra."""
from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@pytest.fixture
def project():
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)


def test_ui_stack_is_optional(project):
    core = set(project["project"]["dependencies"])
    app = set(project["project"]["optional-dependencies"]["app"])

    assert {"streamlit", "pandas", "plotly"} <= app
    assert not core & app


def test_installed_modules(project):
    modules = project["tool"]["setuptools"]["py-modules"]
    assert "app" not in modules
    assert {"ds_linkedlist", "nth_from_back", "running_median"} <= set(modules)
