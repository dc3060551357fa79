"""Tests for the lint and benchmark scripts."""

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

import pytest

ROOT = Path(__file__).resolve().parent.parent


def _load_script(name: str) -> ModuleType:
    path = ROOT / "scripts" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def lints() -> ModuleType:
    return _load_script("extra_lints")


@pytest.fixture(scope="module")
def benchmark() -> ModuleType:
    return _load_script("benchmark")


def _rules(lints: ModuleType, path: str, source: str) -> list[str]:
    return [e.rule for e in lints.lint_source(Path(path), source)]


# =============================================================================
# extra_lints
# =============================================================================


def test_repository_passes_lints(lints: ModuleType) -> None:
    errors = []
    for directory in ("src", "tests", "scripts"):
        for py_file in (ROOT / directory).rglob("*.py"):
            relative = py_file.relative_to(ROOT)
            errors.extend(lints.lint_source(relative, py_file.read_text()))
    assert errors == [], "\n".join(str(e) for e in errors)


def test_print_flagged_in_library(lints: ModuleType) -> None:
    assert _rules(lints, "src/pkg/mod.py", "print('x')\n") == ["no-print"]
    assert _rules(lints, "scripts/tool.py", "print('x')\n") == []


def test_global_random_flagged_in_library(lints: ModuleType) -> None:
    source = "import random\nx = random.randint(1, 6)\nr = random.Random(1)\n"
    assert _rules(lints, "src/pkg/mod.py", source) == ["global-random"]
    assert _rules(lints, "tests/test_mod.py", source) == []


def test_import_in_library_function_flagged(lints: ModuleType) -> None:
    source = "def f():\n    import os\n    return os\n"
    assert _rules(lints, "src/pkg/mod.py", source) == ["import-in-function"]
    assert _rules(lints, "tests/test_mod.py", source) == []


def test_mutable_default_flagged(lints: ModuleType) -> None:
    source = "def f(x=[], y=dict()):\n    return x, y\n"
    assert _rules(lints, "src/pkg/mod.py", source) == [
        "mutable-default",
        "mutable-default",
    ]


def test_class_tests_flagged_except_stateful(lints: ModuleType) -> None:
    source = (
        "class TestThing:\n    pass\n\n"
        "class TestMachine(Machine.TestCase):\n    pass\n"
    )
    assert _rules(lints, "tests/test_mod.py", source) == ["no-class-tests"]


def test_todo_needs_issue_reference(lints: ModuleType) -> None:
    assert _rules(lints, "src/pkg/mod.py", "x = 1  # " + "TODO tidy\n") == [
        "todo-needs-issue"
    ]
    assert _rules(lints, "src/pkg/mod.py", "x = 1  # TODO: WS-12 tidy\n") == []


def test_syntax_error_reported(lints: ModuleType) -> None:
    assert _rules(lints, "src/pkg/mod.py", "def (:\n") == ["syntax-error"]


# =============================================================================
# benchmark
# =============================================================================


def test_benchmark_reports_each_sampler(
    benchmark: ModuleType, capsys: pytest.CaptureFixture[str]
) -> None:
    assert benchmark.main(["--draws", "200", "--size", "5", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["Alias", "Expansion", "Binary"]
    assert all(line.endswith(" ms") for line in lines)


def test_benchmark_rejects_bad_sizes(benchmark: ModuleType) -> None:
    with pytest.raises(SystemExit):
        benchmark.main(["--draws", "0"])


def test_time_draws_is_non_negative(benchmark: ModuleType) -> None:
    from weighted_samplers import BinarySampler, RandomSource

    sampler = BinarySampler([1, 2, 3], [1, 1, 1], RandomSource(0))
    assert benchmark.time_draws(sampler, 100) >= 0.0
