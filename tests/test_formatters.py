"""Tests for output formatters."""

import io
import json

import pytest
from rich.console import Console

from depscope import AnalysisEngine
from depscope.formatters import JsonFormatter, RichFormatter, get_formatter


@pytest.fixture
def result(repo):
    repo.write("a.py", "import b\nimport requests\n")
    repo.write("b.py", "import a\n")
    repo.write("c.py", "")
    return AnalysisEngine(repo.root).run()


def test_get_formatter():
    assert isinstance(get_formatter("json"), JsonFormatter)
    assert isinstance(get_formatter("rich"), RichFormatter)
    with pytest.raises(ValueError):
        get_formatter("csv")


def test_json_format(result):
    data = json.loads(JsonFormatter().format(result))
    assert data["graph"] == {"a.py": ["b.py"], "b.py": ["a.py"], "c.py": []}
    assert data["summary"]["external_dependency_count"] == 1
    assert {m["path"] for m in data["coupling"]} == {"a.py", "b.py", "c.py"}


def test_json_render_prints(result, capsys):
    JsonFormatter().render(result)
    assert json.loads(capsys.readouterr().out)["summary"]["module_count"] == 3


def test_rich_format_returns_text(result):
    text = RichFormatter(top=5).format(result)
    assert "Circular Dependencies (1)" in text
    assert "a.py -> b.py -> a.py" in text
    assert "requests" in text


def test_rich_render_to_console(result):
    buffer = io.StringIO()
    RichFormatter(console=Console(file=buffer, width=120)).render(result)
    output = buffer.getvalue()
    assert "3 files" in output
    assert "2 dependency edges" in output


def test_rich_no_cycles(repo):
    repo.write("x.py", "import os\n")
    text = RichFormatter().format(AnalysisEngine(repo.root).run())
    assert "No circular dependencies" in text


def test_rich_keeps_bracketed_paths(repo):
    repo.write("pages/[id].tsx", "import { load } from './util';\n")
    repo.write("pages/util.ts", "import Page from './[id]';\nimport '@scope/[weird]';\n")
    text = RichFormatter(console=Console(width=120)).format(AnalysisEngine(repo.root).run())

    assert "Circular Dependencies (1)" in text
    assert "pages/[id].tsx -> pages/util.ts -> pages/[id].tsx" in text or (
        "pages/util.ts -> pages/[id].tsx -> pages/util.ts" in text
    )
    assert "pages/.tsx" not in text
    assert "@scope/[weird]" in text
