#!/usr/bin/env python3
"""
grabProc.py

Collect the processed images (jpg, jpeg, png, tif, tiff) from every "proc"
subdirectory of a photo tree into a parallel tree.

Photos are stored by year and event, with finished images in a proc/
subdirectory:

    /photos/2014/0704 - fireworks/proc/a.jpg

Running against /photos with destination /backup copies that file to:

    /backup/2014/0704 - fireworks/a.jpg

Files already present with the same size and a not-older mtime are skipped,
so repeated runs only copy what changed.

Usage:
    python3 grabProc.py [-v] [--dry-run] [--progress] <source-dir> <dest-dir>

Examples:
    python3 grabProc.py -v ~/photos /mnt/backup/photos-proc
    python3 grabProc.py --dry-run ~/photos /mnt/backup/photos-proc
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

from tqdm import tqdm

from procCommon import (
    ArgumentError,
    CopyError,
    GrabProcError,
    RunStatistics,
    getLogger,
    prefixFor,
)
from procCopier import copyProcImages, listImages
from procMapper import destSegments, ensureDestDir
from procWalker import iterProcDirs


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad arguments; usage errors here exit with 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parseArgs(argv=None) -> argparse.Namespace:
    parser = ArgumentParser(
        prog="grabProc",
        description="Copy images from proc/ subdirectories into a parallel directory tree.",
        add_help=False,
    )
    parser.add_argument("source", help="Directory under which photos are stored.")
    parser.add_argument("dest", help="Directory to which proc images are copied.")
    parser.add_argument(
        "-?", "-h", "--help",
        action="help",
        help="Show this help message and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Use verbose output (per proc dir progress and summary).",
    )
    parser.add_argument(
        "--dry-run",
        dest="dryRun",
        action="store_true",
        help="Do not create or copy anything, just report what would be done.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress counter of proc directories.",
    )
    parser.add_argument(
        "--log-level",
        dest="logLevel",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: INFO with -v, otherwise WARNING).",
    )
    return parser.parse_args(argv)


def validatePaths(source: str, dest: str, dryRun: bool = False) -> Tuple[Path, Path]:
    srcPath = Path(source).expanduser()
    if not srcPath.exists():
        raise ArgumentError(f"Source path does not exist: {source}")
    if not srcPath.is_dir():
        raise ArgumentError(f"Source path is not a directory: {source}")

    dstPath = Path(dest).expanduser()
    if not dstPath.exists():
        if dryRun:
            return srcPath.resolve(), dstPath.resolve()
        try:
            dstPath.mkdir(parents=True)
        except OSError as e:
            raise ArgumentError(
                f"Destination path does not exist and unable to create it ({dest}): {e}"
            ) from e
    if not dstPath.is_dir():
        raise ArgumentError(f"Destination path is not a directory: {dest}")

    return srcPath.resolve(), dstPath.resolve()


def handleProcDir(
    sourceRoot: Path,
    procDir: Path,
    destRoot: Path,
    stats: RunStatistics,
    dryRun: bool = False,
    logger: Optional[logging.Logger] = None,
) -> None:
    logger = logger or logging.getLogger(__name__)
    stats.procDirs += 1

    images = listImages(procDir)
    if not images:
        return
    stats.imagesFound += len(images)

    logger.info("%s proc dir: [%s] (%d images)", prefixFor(dryRun), procDir.resolve(), len(images))

    destDir = ensureDestDir(destRoot, destSegments(sourceRoot, procDir), dryRun=dryRun, logger=logger)
    copyProcImages(images, destDir, stats, dryRun=dryRun, logger=logger)


def collectProcImages(
    sourceRoot: Path,
    destRoot: Path,
    *,
    dryRun: bool = False,
    progress: bool = False,
    logger: Optional[logging.Logger] = None,
) -> RunStatistics:
    """Find proc/ subdirs under sourceRoot and copy their images under destRoot."""
    logger = logger or logging.getLogger(__name__)
    stats = RunStatistics()

    procDirs = iterProcDirs(sourceRoot, stats)
    for procDir in tqdm(procDirs, desc="Proc dirs", unit="dir", disable=not progress):
        handleProcDir(sourceRoot, procDir, destRoot, stats, dryRun=dryRun, logger=logger)

    return stats


def main(argv=None) -> int:
    args = parseArgs(argv)
    level = args.logLevel or ("INFO" if args.verbose else "WARNING")
    logger = getLogger("grabProc", level)
    prefix = prefixFor(args.dryRun)

    try:
        sourceRoot, destRoot = validatePaths(args.source, args.dest, dryRun=args.dryRun)
    except ArgumentError as e:
        logger.error("%s", e)
        return 1

    logger.info("%s source path: [%s]", prefix, sourceRoot)
    logger.info("%s destination path: [%s]", prefix, destRoot)
    if args.dryRun:
        logger.info("%s no files will be changed.", prefix)

    try:
        stats = collectProcImages(
            sourceRoot,
            destRoot,
            dryRun=args.dryRun,
            progress=args.progress,
            logger=logger,
        )
    except CopyError as e:
        logger.error("%s", e)
        logger.debug("copy failure detail", exc_info=True)
        return 1
    except GrabProcError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1
    except KeyboardInterrupt:
        print("\n...interrupted by user")
        return 130

    for line in stats.summaryLines():
        logger.info("%s %s", prefix, line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
