#!/usr/bin/env python3
"""Keep environment reads inside the inspector config module."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path


ALLOWED_FILES = {
    "rebuild_inspector/runtime/config.py",
}


def _is_os_environ(node: ast.AST) -> bool:
    return (
        isinstance(node, ast.Attribute)
        and node.attr == "environ"
        and isinstance(node.value, ast.Name)
        and node.value.id == "os"
    )


def _is_env_read(node: ast.AST) -> bool:
    # os.environ["NAME"]
    if isinstance(node, ast.Subscript):
        return _is_os_environ(node.value)
    if not isinstance(node, ast.Call):
        return False
    fn = node.func
    # os.getenv(...)
    if isinstance(fn, ast.Attribute) and fn.attr == "getenv":
        if isinstance(fn.value, ast.Name) and fn.value.id == "os":
            return True
    # os.environ.get(...)
    if isinstance(fn, ast.Attribute) and fn.attr == "get":
        return _is_os_environ(fn.value)
    return False


def check_file(path: Path, rel: str) -> list[str]:
    if rel in ALLOWED_FILES:
        return []
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    return [
        f"{rel}:{node.lineno} env read outside rebuild_inspector/runtime/config.py"
        for node in ast.walk(tree)
        if _is_env_read(node)
    ]


def collect_violations(root: Path) -> list[str]:
    base = root.resolve().parent
    violations: list[str] = []
    for path in sorted(root.rglob("*.py")):
        rel = path.resolve().relative_to(base).as_posix()
        violations.extend(check_file(path, rel))
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check env read placement.")
    parser.add_argument("--root", default="rebuild_inspector")
    args = parser.parse_args()

    violations = collect_violations(Path(args.root))
    if violations:
        print("Env read placement violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
