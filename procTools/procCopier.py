#!/usr/bin/env python3
"""
procCopier.py

Copy images from a proc directory into its mirror directory.

A file is copied when the target is missing, has a different size, or is
older than the source. Otherwise it is counted as a duplicate. Copies keep the
source mtime (shutil.copy2) so the next run sees them as unchanged.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from procCommon import CopyError, RunStatistics, isImage, prefixFor


def listImages(procDir: Path) -> List[Path]:
    try:
        entries = list(procDir.iterdir())
    except PermissionError:
        return []
    return sorted(p for p in entries if p.is_file() and isImage(p))


def needsCopy(src: Path, dst: Path) -> bool:
    if not dst.exists():
        return True
    srcStat = src.stat()
    dstStat = dst.stat()
    if srcStat.st_size != dstStat.st_size:
        return True
    return srcStat.st_mtime_ns > dstStat.st_mtime_ns


def copyImage(src: Path, destDir: Path) -> Path:
    """
    Copy src into destDir, writing to a hidden .partial file first and
    renaming it over the target.
    """
    target = destDir / src.name
    partial = destDir / f".{src.name}.partial"
    try:
        shutil.copy2(src, partial)
        os.replace(partial, target)
    except OSError as e:
        if partial.exists():
            try:
                partial.unlink()
            except OSError:
                pass
        raise CopyError(f"failed to copy {src} -> {target}: {e}") from e
    return target


def copyProcImages(
    images: Iterable[Path],
    destDir: Path,
    stats: RunStatistics,
    dryRun: bool = False,
    logger: Optional[logging.Logger] = None,
) -> None:
    logger = logger or logging.getLogger(__name__)
    prefix = prefixFor(dryRun)

    for src in images:
        dst = destDir / src.name
        if not needsCopy(src, dst):
            stats.duplicateImages += 1
            logger.debug("%s dup: %s", prefix, dst)
            continue

        if not dryRun:
            copyImage(src, destDir)
        stats.imagesCopied += 1
        logger.debug("%s copy: %s -> %s", prefix, src, dst)
