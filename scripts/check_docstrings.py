#!/usr/bin/env python3
"""
Check that public classes and functions have docstrings.
Validates documentation coverage of the greenboard package.
"""

import sys
from pathlib import Path
import ast


def missing_docstrings(path):
    """Return (line, name) for public defs in a file without a docstring.

    Methods are not required to carry docstrings; only module-level
    classes and functions are checked.
    """
    tree = ast.parse(path.read_text(), filename=str(path))
    missing = []
    for node in tree.body:
        if isinstance(node, (ast.FunctionDef, ast.ClassDef)) and not node.name.startswith('_'):
            if ast.get_docstring(node) is None:
                missing.append((node.lineno, node.name))
    return missing


def check_docstrings(package_dir="greenboard"):
    """Check docstring coverage in source code."""
    src_dir = Path(package_dir)
    if not src_dir.exists():
        print(f"✗ {package_dir}/ directory not found")
        return 1

    py_files = sorted(src_dir.rglob("*.py"))
    print(f"✓ Found {len(py_files)} Python files in {package_dir}/")

    failures = 0
    for path in py_files:
        for lineno, name in missing_docstrings(path):
            print(f"✗ {path}:{lineno} {name} has no docstring")
            failures += 1

    if failures:
        return 1
    print("✓ Docstring check passed")
    return 0


if __name__ == "__main__":
    exit_code = check_docstrings(*sys.argv[1:])
    sys.exit(exit_code)
