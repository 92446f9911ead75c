"""Tests for regex-based import extraction."""

from depscope.scanning.patterns import (
    PATTERNS,
    extract_c,
    extract_csharp,
    extract_go,
    extract_java,
    extract_kotlin_scala,
    extract_php,
    extract_python,
    extract_ruby,
    extract_rust,
    extract_swift,
)


class TestPython:
    def test_plain_and_aliased_imports(self):
        code = "import os\nimport a.b, c as d\n"
        assert extract_python(code) == {"os", "a.b", "c"}

    def test_from_imports(self):
        code = "from pkg.mod import thing\nfrom .x.y import z\nfrom .. import w\nfrom . import v\n"
        assert extract_python(code) == {"pkg.mod", ".x.y", "..", "."}

    def test_comments_ignored(self):
        code = "# import secret\nx = 1  # from nowhere import nothing\n"
        assert extract_python(code) == set()

    def test_indented_import(self):
        code = "def f():\n    import json\n    return json\n"
        assert extract_python(code) == {"json"}


class TestJava:
    def test_class_import(self):
        assert extract_java("import com.acme.util.Strings;\n") == {"com.acme.util.Strings"}

    def test_static_import_keeps_class(self):
        assert extract_java("import static com.acme.Math.max;\n") == {"com.acme.Math"}

    def test_wildcard(self):
        assert extract_java("import java.util.*;\n") == {"java.util"}


class TestGo:
    def test_single_and_aliased(self):
        code = 'import "fmt"\nimport str "strings"\n'
        assert extract_go(code) == {"fmt", "strings"}

    def test_grouped_block(self):
        code = 'import (\n\t"fmt"\n\tlog "github.com/sirupsen/logrus"\n\t_ "example.com/m/internal/db"\n)\n'
        assert extract_go(code) == {"fmt", "github.com/sirupsen/logrus", "example.com/m/internal/db"}

    def test_parenthesis_in_comment_does_not_end_block(self):
        code = 'import (\n\t"fmt" // printing (stdout)\n\t"./lib"\n)\n'
        assert extract_go(code) == {"fmt", "./lib"}

    def test_one_line_group(self):
        assert extract_go('import ("os")\n\nfunc main() {}\n') == {"os"}


class TestRust:
    def test_use_and_extern_crate(self):
        code = "use serde::Serialize;\nuse crate::model::User;\nuse super::x;\nextern crate rand;\n"
        assert extract_rust(code) == {"serde", "rand"}

    def test_pub_use(self):
        assert extract_rust("pub use tokio::sync::Mutex;\n") == {"tokio"}


class TestC:
    def test_quoted_includes_always_kept(self):
        assert extract_c('#include "util.h"\n') == {"util.h"}

    def test_single_segment_system_headers_skipped(self):
        code = "#include <stdio.h>\n#include <vector>\n#include <boost/asio.hpp>\n"
        assert extract_c(code) == {"boost/asio.hpp"}


class TestCSharp:
    def test_using_namespace(self):
        assert extract_csharp("using System.Collections.Generic;\n") == {"System.Collections.Generic"}

    def test_static_and_alias_skipped(self):
        code = "using static System.Math;\nusing Json = Newtonsoft.Json;\n"
        assert extract_csharp(code) == set()


class TestPhp:
    def test_include_require(self):
        code = "<?php\nrequire_once 'lib/db.php';\ninclude(\"views/header.php\");\n"
        assert extract_php(code) == {"lib/db.php", "views/header.php"}

    def test_use_keeps_first_namespace_segment(self):
        assert extract_php("<?php\nuse App\\Models\\User;\n") == {"App"}

    def test_aliased_use_skipped(self):
        assert extract_php("<?php\nuse App\\Models\\User as U;\n") == set()


class TestRuby:
    def test_require(self):
        assert extract_ruby("require 'json'\nrequire \"my_gem/client\"\n") == {"json", "my_gem/client"}

    def test_require_relative_becomes_dot_relative(self):
        code = "require_relative 'helper'\nrequire_relative '../lib/thing'\n"
        assert extract_ruby(code) == {"./helper", "../lib/thing"}


class TestJvmAndSwift:
    def test_kotlin(self):
        code = "package app\nimport kotlinx.coroutines.launch\nimport com.acme.*\n"
        assert extract_kotlin_scala(code) == {"kotlinx.coroutines.launch", "com.acme"}

    def test_scala_wildcard(self):
        assert extract_kotlin_scala("import scala.collection._\n") == {"scala.collection"}

    def test_swift(self):
        code = "import Foundation\n@testable import MyApp\nimport struct Darwin.size_t\n"
        assert extract_swift(code) == {"Foundation", "MyApp", "Darwin.size_t"}


def test_every_regex_dialect_has_a_pattern():
    for name in ("python", "java", "go", "rust", "c", "csharp", "php", "ruby", "kotlin", "scala", "swift"):
        assert name in PATTERNS


def test_garbage_input_never_raises():
    junk = "\x00\x01 import ( \" unterminated\n#include <\nuse ;;"
    for extract in PATTERNS.values():
        assert isinstance(extract(junk), set)
