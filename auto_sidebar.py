#!/usr/bin/env python3
"""
Derive a sidebar navigation tree from a directory of markdown documents.

Features:
- Depth-first walk of a project-relative directory
- Directories become collapsible groups, .md files become links
- Top-level entries matching the exclusion set are skipped
- Link targets use forward slashes whatever the host separator is

Usage (shell):
  python auto_sidebar.py front-end/react
  python auto_sidebar.py docs --root ./site-src --sort --indent 2

Notes:
- Entry order follows the filesystem listing, which is not guaranteed to be
  alphabetical. Pass --sort (or sort=True) for a stable lexicographic order.
- Exclusions only apply to the top-level listing unless exclude_nested=True,
  so a nested folder called node_modules still shows up by default.
"""

from __future__ import annotations

import argparse
import json
import os
import re
import stat
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict


# names skipped in the directory handed to build_sidebar
DEFAULT_EXCLUDES: FrozenSet[str] = frozenset({
    "index.md",
    ".vitepress",
    "node_modules",
    ".idea",
    "assets",
})

_MD_SUFFIX = re.compile(r"\.md$")


# -- data structures --
class NavLink(BaseModel):
    """Leaf entry pointing at a single markdown document."""

    model_config = ConfigDict(frozen=True)

    text: str
    link: str


class NavGroup(BaseModel):
    """Collapsible entry built from a directory."""

    model_config = ConfigDict(frozen=True)

    text: str
    collapsible: bool = True
    items: Tuple[NavEntry, ...] = ()


NavEntry = Union[NavLink, NavGroup]
NavGroup.model_rebuild()


# -- filesystem access --
class LocalFileSystem:
    """Read-only access to the host filesystem.

    Any object with the same two methods can be passed to build_sidebar.
    """

    def list_dir(self, path: str) -> List[str]:
        return os.listdir(path)

    def is_dir(self, path: str) -> bool:
        # lstat: a symlink to a directory is treated as a plain entry
        return stat.S_ISDIR(os.lstat(path).st_mode)


# -- helpers --
def _strip_md_suffix(name: str) -> str:
    return _MD_SUFFIX.sub("", name)


def _is_markdown_name(name: str) -> bool:
    # splitext(".md") has no extension, so dotfiles never count as documents
    return os.path.splitext(name)[1] == ".md"


def _collect(names: Iterable[str], dir_path: str, pathname: str, fs, excludes: FrozenSet[str], exclude_nested: bool, sort: bool) -> List[NavEntry]:
    """Turn the entries of one directory into navigation entries, recursing into subdirectories."""
    entries: List[NavEntry] = []
    for name in names:
        full_path = os.path.join(dir_path, name)
        if fs.is_dir(full_path):
            children = _listing(fs, full_path, excludes if exclude_nested else frozenset(), sort)
            entries.append(NavGroup(
                text=_strip_md_suffix(name),
                collapsible=True,
                items=tuple(_collect(children, full_path, f"{pathname}/{name}", fs, excludes, exclude_nested, sort)),
            ))
        elif _is_markdown_name(name):
            stem = _strip_md_suffix(name)
            entries.append(NavLink(text=stem, link=f"{pathname}/{stem}"))
    return entries


def _listing(fs, dir_path: str, excludes: FrozenSet[str], sort: bool) -> List[str]:
    names = [n for n in dict.fromkeys(fs.list_dir(dir_path)) if n not in excludes]
    if sort:
        names.sort()
    return names


def build_sidebar(
    pathname: str,
    root: Optional[Union[str, Path]] = None,
    excludes: Iterable[str] = DEFAULT_EXCLUDES,
    fs=None,
    exclude_nested: bool = False,
    sort: bool = False,
) -> List[NavEntry]:
    """Build the sidebar entries for a project-relative directory.

    pathname is both the directory to read (relative to root, default: the
    current working directory) and the prefix for every link target.

    Raises FileNotFoundError, NotADirectoryError or PermissionError straight
    from the filesystem; nothing is returned for a partially read tree.
    """
    fs = fs if fs is not None else LocalFileSystem()
    base = str(root) if root is not None else os.getcwd()
    dir_path = os.path.join(base, pathname)
    logical = pathname.replace("\\", "/").rstrip("/")

    excludes = frozenset(excludes)
    names = _listing(fs, dir_path, excludes, sort)
    return _collect(names, dir_path, logical, fs, excludes, exclude_nested, sort)


def sidebar_to_data(entries: Iterable[NavEntry]) -> List[dict]:
    """Plain JSON-ready structure in the generator's sidebar format."""
    return [entry.model_dump(mode="json") for entry in entries]


# -- CLI --
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the sidebar tree for a documentation folder as JSON.")
    parser.add_argument("pathname", help="Folder relative to --root, also used as the link prefix")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root (default: current directory)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="NAME",
        help="Basename to skip; repeat for several (default: the built-in exclusion set)",
    )
    parser.add_argument(
        "--exclude-nested",
        action="store_true",
        help="Apply the exclusions inside subfolders too",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort entries by name instead of using the filesystem order",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    excludes = frozenset(args.exclude) if args.exclude is not None else DEFAULT_EXCLUDES

    try:
        entries = build_sidebar(
            args.pathname,
            root=args.root,
            excludes=excludes,
            exclude_nested=args.exclude_nested,
            sort=args.sort,
        )
    except (FileNotFoundError, NotADirectoryError, PermissionError) as exc:
        raise SystemExit(f"Cannot read sidebar folder: {exc}") from exc

    print(json.dumps(sidebar_to_data(entries), ensure_ascii=False, indent=args.indent))


if __name__ == "__main__":
    main()
