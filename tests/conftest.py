"""Test configuration and fixtures for the sidebar builder and site config."""

import errno
import os
from pathlib import Path

import pytest

MEM_ROOT = "/mem"


class MemoryFileSystem:
    """In-memory stand-in for LocalFileSystem.

    Directories are dicts (insertion order is the listing order), files are
    strings.
    """

    def __init__(self, tree, root=MEM_ROOT, denied=()):
        self.tree = tree
        self.root = root
        self.denied = {os.path.normpath(os.path.join(root, d)) for d in denied}
        self.listed = []

    def _lookup(self, path):
        rel = os.path.relpath(path, self.root)
        node = self.tree
        if rel == ".":
            return node
        for part in Path(rel).parts:
            if not isinstance(node, dict) or part not in node:
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
            node = node[part]
        return node

    def list_dir(self, path):
        if os.path.normpath(path) in self.denied:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
        node = self._lookup(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        self.listed.append(os.path.normpath(path))
        return list(node)

    def is_dir(self, path):
        return isinstance(self._lookup(path), dict)


@pytest.fixture
def make_fs():
    """Factory for in-memory filesystems rooted at MEM_ROOT."""
    return MemoryFileSystem


@pytest.fixture
def docs_fs():
    """The docs/ example: index.md, guide.md and advanced/topics.md."""
    return MemoryFileSystem({
        "docs": {
            "index.md": "# Home",
            "guide.md": "# Guide",
            "advanced": {"topics.md": "# Topics"},
        },
    })


@pytest.fixture
def docs_tree(tmp_path):
    """Same docs/ layout as docs_fs, written to disk."""
    docs = tmp_path / "docs"
    (docs / "advanced").mkdir(parents=True)
    (docs / "index.md").write_text("# Home\n", encoding="utf-8")
    (docs / "guide.md").write_text("# Guide\n", encoding="utf-8")
    (docs / "advanced" / "topics.md").write_text("# Topics\n", encoding="utf-8")
    return tmp_path
