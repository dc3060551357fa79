#!/usr/bin/env python3
"""Project lint rules not covered by ruff.

Rules:
1. No class-based tests in test files (use module-level functions)
2. No imports inside library functions
3. No mutable default arguments
4. No print() in library code (use logging)
5. No TODO/FIXME comments without issue references
6. No module-level random.* draws in library code (take a RandomSource)

Usage: python scripts/extra_lints.py [paths...]
"""

import ast
import re
import sys
from dataclasses import dataclass
from pathlib import Path

# Calls on the global `random` module that read or advance hidden shared
# state. Constructing `random.Random(...)` is fine.
GLOBAL_RANDOM_CALLS = frozenset(
    {
        "choice",
        "choices",
        "getrandbits",
        "randint",
        "random",
        "randrange",
        "sample",
        "seed",
        "shuffle",
        "uniform",
    }
)

TODO_PATTERN = re.compile(r"#\s*(TODO|FIXME)(?!:\s*\w+-\d+)", re.IGNORECASE)


@dataclass
class LintError:
    file: Path
    line: int
    column: int
    rule: str
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}: {self.rule}: {self.message}"


class LintVisitor(ast.NodeVisitor):
    """Walks one module and records rule violations."""

    def __init__(self, file: Path) -> None:
        self.file = file
        self.errors: list[LintError] = []
        self._is_test_file = file.name.startswith("test_") or file.name == "conftest.py"
        self._is_library = "src" in file.parts
        self._function_depth = 0

    def _add_error(self, node: ast.AST, rule: str, message: str) -> None:
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        self.errors.append(LintError(self.file, lineno, col_offset, rule, message))

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        if self._is_test_file and node.name.startswith("Test"):
            # Hypothesis stateful tests subclass SomeMachine.TestCase.
            is_hypothesis_stateful = any(
                isinstance(base, ast.Attribute) and base.attr == "TestCase"
                for base in node.bases
            )
            if not is_hypothesis_stateful:
                msg = f"Class-based test '{node.name}' found. Use functions."
                self._add_error(node, "no-class-tests", msg)
        self.generic_visit(node)

    def _visit_function(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        self._function_depth += 1
        for default in node.args.defaults + node.args.kw_defaults:
            if default is not None and _is_mutable_default(default):
                self._add_error(
                    default,
                    "mutable-default",
                    "Mutable default argument. Use None instead.",
                )
        self.generic_visit(node)
        self._function_depth -= 1

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._visit_function(node)

    def _check_nested_import(self, node: ast.Import | ast.ImportFrom) -> None:
        if self._function_depth > 0 and self._is_library:
            self._add_error(
                node,
                "import-in-function",
                "Import inside function. Move to module level.",
            )

    def visit_Import(self, node: ast.Import) -> None:
        self._check_nested_import(node)
        self.generic_visit(node)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        self._check_nested_import(node)
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        if self._is_library:
            func = node.func
            if isinstance(func, ast.Name) and func.id == "print":
                self._add_error(
                    node, "no-print", "Use logging instead of print() in library code."
                )
            if (
                isinstance(func, ast.Attribute)
                and isinstance(func.value, ast.Name)
                and func.value.id == "random"
                and func.attr in GLOBAL_RANDOM_CALLS
            ):
                self._add_error(
                    node,
                    "global-random",
                    f"random.{func.attr}() uses shared global state. "
                    "Draw from a RandomSource instead.",
                )
        self.generic_visit(node)


def _is_mutable_default(node: ast.expr) -> bool:
    if isinstance(node, (ast.List, ast.Dict, ast.Set)):
        return True
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id in ("list", "dict", "set")
    )


def check_todo_comments(file: Path, source: str) -> list[LintError]:
    errors: list[LintError] = []
    for i, line in enumerate(source.splitlines(), 1):
        match = TODO_PATTERN.search(line)
        if match:
            msg = f"{match.group(1)} needs issue reference (e.g., TODO: PROJ-123)."
            errors.append(LintError(file, i, match.start(), "todo-needs-issue", msg))
    return errors


def lint_source(path: Path, source: str) -> list[LintError]:
    """Lint already-loaded source text attributed to ``path``."""
    try:
        tree = ast.parse(source)
    except SyntaxError as e:
        return [LintError(path, e.lineno or 0, e.offset or 0, "syntax-error", str(e))]
    visitor = LintVisitor(path)
    visitor.visit(tree)
    return visitor.errors + check_todo_comments(path, source)


def lint_file(path: Path) -> list[LintError]:
    return lint_source(path, path.read_text())


def main(argv: list[str] | None = None) -> int:
    roots = argv if argv else ["src", "tests", "scripts"]
    errors: list[LintError] = []
    for root in roots:
        root_path = Path(root)
        if root_path.is_file():
            errors.extend(lint_file(root_path))
            continue
        if not root_path.exists():
            continue
        for py_file in root_path.rglob("*.py"):
            errors.extend(lint_file(py_file))

    if errors:
        for error in sorted(errors, key=lambda e: (str(e.file), e.line, e.column)):
            print(error)
        print(f"\nFound {len(errors)} custom lint error(s)")
        return 1

    print("All custom lint checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
