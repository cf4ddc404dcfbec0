#!/usr/bin/env python3
"""
procWalker.py

Depth-first walk of a photo tree that yields every directory named "proc".
A proc directory is a leaf of the walk: it is handed to the caller and not
searched any further.
"""

import os
from pathlib import Path
from typing import Iterator, List, Set

from procCommon import PROC_DIR_NAME, RunStatistics


def isProcDir(path: Path) -> bool:
    return path.name.lower() == PROC_DIR_NAME


def isReadableDir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.R_OK | os.X_OK)


def iterSubdirs(directory: Path) -> List[Path]:
    """Readable child directories of directory, sorted by name."""
    try:
        children = list(directory.iterdir())
    except PermissionError:
        # listed as readable but refused: treat as empty
        return []
    return sorted(p for p in children if isReadableDir(p))


def iterProcDirs(root: Path, stats: RunStatistics) -> Iterator[Path]:
    """
    Yield proc directories under root in depth-first order.

    stats.dirsSearched is bumped once for every directory that is searched,
    root included. Directories reached twice (symlink loops, links back into
    the tree) are searched once, and each proc directory is yielded once,
    both keyed by resolved path.
    """
    searched: Set[Path] = set()
    handled: Set[Path] = set()
    stack: List[Path] = [root]

    while stack:
        directory = stack.pop()
        canonical = directory.resolve()
        if canonical in searched:
            continue
        searched.add(canonical)
        stats.dirsSearched += 1

        subdirs = iterSubdirs(directory)
        # reversed so the stack pops siblings in name order
        for child in reversed(subdirs):
            if not isProcDir(child):
                stack.append(child)

        for child in subdirs:
            if isProcDir(child):
                procCanonical = child.resolve()
                if procCanonical in handled:
                    continue
                handled.add(procCanonical)
                yield child
