"""Tests for ImportExtractor (tree-sitter AST walk and regex dispatch)."""

from pathlib import Path

import pytest

from depscope.scanning.extractor import ImportExtractor
from depscope.scanning.models import RawDependency, SourceFile


@pytest.fixture(scope="module")
def extractor():
    return ImportExtractor()


class TestEcmaScript:
    def test_static_imports(self, extractor):
        code = (
            "import React from 'react';\n"
            "import { a, b } from \"./util\";\n"
            "import * as ns from '../ns';\n"
            "import './side-effect';\n"
        )
        assert extractor.extract("src/app.js", code) == {"react", "./util", "../ns", "./side-effect"}

    def test_require_and_dynamic_import(self, extractor):
        code = (
            "const fs = require('fs');\n"
            "const lazy = () => import('./lazy');\n"
            "module.exports = { x: require(\"./x\") };\n"
        )
        assert extractor.extract("index.js", code) == {"fs", "./lazy", "./x"}

    def test_non_literal_arguments_ignored(self, extractor):
        code = "const name = './a';\nrequire(name);\nimport(`./${name}`);\nrequire();\n"
        assert extractor.extract("index.js", code) == set()

    def test_other_callees_ignored(self, extractor):
        code = "load('./a');\nobj.require('./b');\n"
        assert extractor.extract("index.js", code) == set()

    def test_re_exports(self, extractor):
        code = "export * from './all';\nexport { one } from './one';\nexport const two = 2;\n"
        assert extractor.extract("index.mjs", code) == {"./all", "./one"}

    def test_duplicates_collapse(self, extractor):
        code = "import a from './a';\nconst again = require('./a');\n"
        assert extractor.extract("index.js", code) == {"./a"}

    def test_syntax_errors_keep_valid_statements(self, extractor):
        code = "import ok from './ok';\nconst = ;;\nfunction (\n"
        deps = extractor.extract("broken.js", code)
        assert "./ok" in deps

    def test_empty_file(self, extractor):
        assert extractor.extract("empty.js", "") == set()


class TestTypeScript:
    def test_type_imports_and_require_clause(self, extractor):
        code = (
            "import type { User } from './types';\n"
            "import fs = require('fs');\n"
            "import { b } from './b';\n"
        )
        assert extractor.extract("src/a.ts", code) == {"./types", "fs", "./b"}

    def test_tsx(self, extractor):
        code = "import React from 'react';\nimport Button from './Button';\nexport const App = () => <Button />;\n"
        assert extractor.extract("src/App.tsx", code) == {"react", "./Button"}


class TestDispatch:
    def test_regex_language(self, extractor):
        assert extractor.extract("pkg/mod.py", "from .sibling import x\n") == {".sibling"}

    def test_unsupported_extension(self, extractor):
        assert extractor.extract("README.md", "import x from './y'") == set()

    def test_extension_is_case_insensitive(self, extractor):
        assert extractor.extract("Legacy.JS", "require('./a')") == {"./a"}


def test_extract_dependencies_wraps_source(extractor, tmp_path):
    source = SourceFile.from_path(tmp_path / "a.py", tmp_path, text="import b\nimport a.c\n")
    raw = extractor.extract_dependencies(source)
    assert raw == [RawDependency("a.c", source), RawDependency("b", source)]
    assert all(r.source.path == "a.py" for r in raw)


def test_source_file_identity(tmp_path):
    source = SourceFile.from_path(tmp_path / "src" / "x.ts", tmp_path)
    assert source.path == "src/x.ts"
    assert source.abs_path == Path(tmp_path / "src" / "x.ts")
    assert source.language.value == "typescript"


class _FailingParser:
    """Parser double that records the grammar it was asked for, then fails."""

    def __init__(self):
        self.grammars = []

    def parse(self, source, grammar):
        self.grammars.append(grammar)
        raise ValueError("grammar unavailable")


class TestParserFailure:
    def test_failure_yields_empty_set(self, caplog):
        parser = _FailingParser()
        with caplog.at_level("WARNING", logger="depscope"):
            deps = ImportExtractor(parser=parser).extract("src/App.tsx", "import x from './y';\n")
        assert deps == set()
        assert parser.grammars == ["tsx"]
        assert "tsx" in caplog.text

    def test_regex_languages_never_touch_the_parser(self):
        parser = _FailingParser()
        assert ImportExtractor(parser=parser).extract("a.py", "import b\n") == {"b"}
        assert parser.grammars == []
