"""Shared fixtures for building directory trees in tests."""

from __future__ import annotations

from pathlib import Path


def make_tree(root: Path, layout: dict) -> Path:
    """Create ``layout`` under ``root``.

    String or bytes values become files with that content, dict values become
    subdirectories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = root / name
        if isinstance(value, dict):
            make_tree(path, value)
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_text(value, encoding="utf-8")
    return root
