"""Shared fixtures."""

import pytest


@pytest.fixture
def root(tmp_path):
    """Canonical sandbox root (tmp_path may sit behind a symlink, e.g. on macOS)."""
    root = tmp_path.resolve() / "root"
    root.mkdir()
    return root


@pytest.fixture
def outside(tmp_path):
    """Canonical directory next to root, outside the sandbox."""
    outside = tmp_path.resolve() / "outside"
    outside.mkdir()
    (outside / "secret.txt").write_text("top secret")
    return outside
