from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]

# Modules that must stay free of persistence and host concerns.
PURE_CORE = [
    ROOT / "core" / "domain",
    ROOT / "core" / "services" / "timeline",
    ROOT / "core" / "services" / "task" / "hierarchy.py",
    ROOT / "core" / "services" / "task" / "wbs.py",
    ROOT / "core" / "services" / "scheduling" / "constraints.py",
    ROOT / "core" / "services" / "scheduling" / "engine.py",
    ROOT / "core" / "services" / "scheduling" / "graph.py",
    ROOT / "core" / "services" / "scheduling" / "models.py",
    ROOT / "core" / "services" / "scheduling" / "passes.py",
    ROOT / "core" / "services" / "scheduling" / "projection.py",
]


def _line_count(path: Path) -> int:
    return len(path.read_text(encoding="utf-8", errors="ignore").splitlines())


def _python_files(root: Path):
    if root.is_file():
        yield root
        return
    for path in root.rglob("*.py"):
        # Keep architecture checks focused on source/test code, not packaged artifacts.
        if "dist" in path.parts or "build" in path.parts:
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            yield node.module or ""


def _matches(module: str, prefixes: tuple[str, ...]) -> bool:
    return any(module == p or module.startswith(p + ".") for p in prefixes)


def test_no_python_module_exceeds_hard_line_limit():
    offenders = []
    for path in _python_files(ROOT):
        lines = _line_count(path)
        if lines > 1200:
            offenders.append((str(path.relative_to(ROOT)), lines))
    assert not offenders, f"Modules exceed hard 1200-line limit: {offenders}"


def test_core_layer_does_not_import_infra_layer():
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core"):
        for module in _imported_modules(path):
            if _matches(module, ("infra",)):
                violations.append((str(path.relative_to(ROOT)), module))

    assert not violations, f"Core layer imports infra layer: {violations}"


def test_pure_core_has_no_persistence_imports():
    violations: list[tuple[str, str]] = []
    for root in PURE_CORE:
        for path in _python_files(root):
            for module in _imported_modules(path):
                if _matches(module, ("sqlalchemy", "alembic", "core.interfaces")):
                    violations.append((str(path.relative_to(ROOT)), module))

    assert not violations, f"Pure scheduling core imports persistence: {violations}"


def test_infra_repositories_module_is_facade_only():
    repo_path = ROOT / "infra" / "db" / "repositories.py"
    text = repo_path.read_text(encoding="utf-8", errors="ignore")

    assert "from infra.db.project import" in text
    assert "from infra.db.task import" in text
    assert "class SqlAlchemy" not in text
