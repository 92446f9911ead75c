"""Regex import extraction for languages without an AST path.

Best-effort by design: each function scans raw text line-wise and returns
the set of specifiers it recognizes. Nothing here raises on odd input.
"""

from __future__ import annotations

import re
from typing import Callable

# ── Python ─────────────────────────────────────────────────────────

_PY_IMPORT = re.compile(r"^[ \t]*import[ \t]+([^#\n;]+)", re.MULTILINE)
_PY_FROM = re.compile(r"^[ \t]*from[ \t]+(\.+[\w.]*|[\w.]+)[ \t]+import\b", re.MULTILINE)
_PY_MODULE = re.compile(r"^\.*[A-Za-z_][\w.]*$|^\.+$")


def extract_python(content: str) -> set[str]:
    deps: set[str] = set()
    for match in _PY_IMPORT.finditer(content):
        for part in match.group(1).split(","):
            tokens = part.strip().strip("()").split()
            if tokens and _PY_MODULE.match(tokens[0]):
                deps.add(tokens[0])
    for match in _PY_FROM.finditer(content):
        deps.add(match.group(1))
    return deps


# ── JVM family ─────────────────────────────────────────────────────

_JAVA_IMPORT = re.compile(r"^\s*import\s+(static\s+)?([\w.]+?)(\.\*)?\s*;", re.MULTILINE)


def extract_java(content: str) -> set[str]:
    deps: set[str] = set()
    for match in _JAVA_IMPORT.finditer(content):
        name = match.group(2)
        if match.group(1) and not match.group(3):
            # static import names a member: keep the owning class
            name = name.rsplit(".", 1)[0]
        deps.add(name)
    return deps


_KOTLIN_IMPORT = re.compile(r"^\s*import\s+([\w.]+)", re.MULTILINE)


def extract_kotlin_scala(content: str) -> set[str]:
    deps: set[str] = set()
    for match in _KOTLIN_IMPORT.finditer(content):
        name = match.group(1).rstrip(".")
        if name.endswith("._"):
            name = name[:-2]
        if name:
            deps.add(name)
    return deps


_SWIFT_IMPORT = re.compile(
    r"^\s*(?:@\w+\s+)*import\s+(?:(?:typealias|struct|class|enum|protocol|let|var|func)\s+)?([\w.]+)",
    re.MULTILINE,
)


def extract_swift(content: str) -> set[str]:
    return {m.group(1) for m in _SWIFT_IMPORT.finditer(content)}


# ── Go ─────────────────────────────────────────────────────────────

_GO_SINGLE = re.compile(r'^\s*import\s+(?:[\w.]+\s+)?"([^"]+)"', re.MULTILINE)
# One-line groups close on the same line; others at a line holding only ")"
_GO_BLOCK = re.compile(
    r"^\s*import\s*\((?:([^\n]*?)\)|(.*?)^\s*\))", re.MULTILINE | re.DOTALL
)
_GO_BLOCK_LINE = re.compile(r'^\s*(?:[\w.]+\s+)?"([^"]+)"')


def extract_go(content: str) -> set[str]:
    deps = {m.group(1) for m in _GO_SINGLE.finditer(content)}
    for block in _GO_BLOCK.finditer(content):
        body = block.group(1) if block.group(1) is not None else block.group(2)
        for line in body.splitlines():
            line_match = _GO_BLOCK_LINE.match(line)
            if line_match:
                deps.add(line_match.group(1))
    return deps


# ── Rust ───────────────────────────────────────────────────────────

_RUST_USE = re.compile(r"^\s*(?:pub(?:\([^)]*\))?\s+)?use\s+([^;]+);", re.MULTILINE)
_RUST_EXTERN = re.compile(r"^\s*extern\s+crate\s+(\w+)", re.MULTILINE)
_RUST_LOCAL_ROOTS = frozenset({"crate", "super", "self"})


def extract_rust(content: str) -> set[str]:
    deps: set[str] = set()
    for match in _RUST_USE.finditer(content):
        head = match.group(1).strip().lstrip(":").lstrip("{").split("::")[0].strip()
        if head and head not in _RUST_LOCAL_ROOTS:
            deps.add(head)
    deps.update(m.group(1) for m in _RUST_EXTERN.finditer(content))
    return deps


# ── C / C++ ────────────────────────────────────────────────────────

_C_INCLUDE = re.compile(r'^\s*#\s*include\s*([<"])([^>"]+)[>"]', re.MULTILINE)


def extract_c(content: str) -> set[str]:
    deps: set[str] = set()
    for match in _C_INCLUDE.finditer(content):
        bracket, name = match.groups()
        # <stdio.h>, <vector>: single-segment system headers
        if bracket == "<" and "/" not in name:
            continue
        deps.add(name)
    return deps


# ── C# ─────────────────────────────────────────────────────────────

_CS_USING = re.compile(r"^\s*(?:global\s+)?using\s+([^;=()]+?)\s*;", re.MULTILINE)


def extract_csharp(content: str) -> set[str]:
    deps: set[str] = set()
    for match in _CS_USING.finditer(content):
        name = match.group(1).strip()
        if name.startswith("static ") or " " in name:
            continue
        deps.add(name)
    return deps


# ── PHP ────────────────────────────────────────────────────────────

_PHP_INCLUDE = re.compile(r"\b(?:include|require)(?:_once)?\s*\(?\s*['\"]([^'\"]+)['\"]")
_PHP_USE = re.compile(r"^\s*use\s+([^;]+);", re.MULTILINE)


def extract_php(content: str) -> set[str]:
    deps = {m.group(1) for m in _PHP_INCLUDE.finditer(content)}
    for match in _PHP_USE.finditer(content):
        statement = match.group(1).strip()
        if re.search(r"\s+as\s+", statement, re.IGNORECASE):
            continue
        for prefix in ("function ", "const "):
            if statement.startswith(prefix):
                statement = statement[len(prefix):].strip()
        head = statement.lstrip("\\").split("\\")[0].strip()
        if head:
            deps.add(head)
    return deps


# ── Ruby ───────────────────────────────────────────────────────────

_RB_REQUIRE = re.compile(r"^\s*require\s*\(?\s*['\"]([^'\"]+)['\"]", re.MULTILINE)
_RB_REQUIRE_RELATIVE = re.compile(r"^\s*require_relative\s*\(?\s*['\"]([^'\"]+)['\"]", re.MULTILINE)


def extract_ruby(content: str) -> set[str]:
    deps = {m.group(1) for m in _RB_REQUIRE.finditer(content)}
    for match in _RB_REQUIRE_RELATIVE.finditer(content):
        target = match.group(1)
        if not target.startswith((".", "/")):
            target = "./" + target
        deps.add(target)
    return deps


PATTERNS: dict[str, Callable[[str], set[str]]] = {
    "python": extract_python,
    "java": extract_java,
    "kotlin": extract_kotlin_scala,
    "scala": extract_kotlin_scala,
    "swift": extract_swift,
    "go": extract_go,
    "rust": extract_rust,
    "c": extract_c,
    "csharp": extract_csharp,
    "php": extract_php,
    "ruby": extract_ruby,
}
