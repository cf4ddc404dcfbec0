#!/usr/bin/env python3
"""
procMapper.py

Map a proc directory onto its mirror under the destination root.

    source root:  /photos
    proc dir:     /photos/2014/0704 - fireworks/proc
    dest root:    /backup
    mirror dir:   /backup/2014/0704 - fireworks
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from procCommon import DestinationConflictError, DirectoryCreationError, prefixFor


def commonPrefixLength(a: Sequence[str], b: Sequence[str]) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def destSegments(sourceRoot: Path, procDir: Path) -> List[str]:
    """Segments of procDir below its common ancestor with sourceRoot, minus the trailing proc."""
    rootParts = sourceRoot.resolve().parts
    procParts = procDir.resolve().parts
    common = commonPrefixLength(rootParts, procParts)
    return list(procParts[common:len(procParts) - 1])


def mapDestDir(sourceRoot: Path, procDir: Path, destRoot: Path) -> Path:
    return destRoot.joinpath(*destSegments(sourceRoot, procDir))


def ensureDestDir(
    destRoot: Path,
    segments: Sequence[str],
    dryRun: bool = False,
    logger: Optional[logging.Logger] = None,
) -> Path:
    """
    Create destRoot/segments[0]/segments[1]/... one level at a time.

    Raises DestinationConflictError when a level exists as a non-directory and
    DirectoryCreationError when mkdir fails. In dry-run nothing is created.
    """
    logger = logger or logging.getLogger(__name__)
    prefix = prefixFor(dryRun)

    current = destRoot
    for segment in segments:
        current = current / segment
        if current.exists():
            if current.is_dir():
                continue
            raise DestinationConflictError(
                f"destination path exists but is not a directory: {current}"
            )
        if dryRun:
            logger.debug("%s would create dir: %s", prefix, current)
            continue
        try:
            current.mkdir()
        except OSError as e:
            raise DirectoryCreationError(
                f"failed to create destination subdir: {current} ({e})"
            ) from e
        logger.debug("%s created dir: %s", prefix, current)
    return current
