#!/usr/bin/env python3
"""
procCommon.py

Shared constants, errors and helpers for the grabProc tools.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ----------------------------------------------------------------------
# File type definitions
# ----------------------------------------------------------------------

PROC_DIR_NAME = "proc"

IMAGE_EXTS = (".jpg", ".jpeg", ".png", ".tif", ".tiff")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def isImage(path: Path) -> bool:
    return path.name.lower().endswith(IMAGE_EXTS)


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

class GrabProcError(Exception):
    """Base error for grabProc."""


class ArgumentError(GrabProcError):
    pass


class DestinationConflictError(GrabProcError):
    pass


class DirectoryCreationError(GrabProcError):
    pass


class CopyError(GrabProcError):
    pass


# ----------------------------------------------------------------------
# Run statistics
# ----------------------------------------------------------------------

@dataclass
class RunStatistics:
    dirsSearched: int = 0
    procDirs: int = 0
    imagesFound: int = 0
    imagesCopied: int = 0
    duplicateImages: int = 0

    def summaryLines(self):
        return [
            f"Dirs Searched: {self.dirsSearched}",
            f"Proc Dirs: {self.procDirs}",
            f"Images Found: {self.imagesFound}",
            f"Images Copied: {self.imagesCopied}",
            f"Duplicate Images: {self.duplicateImages}",
        ]


# ----------------------------------------------------------------------
# Logging helper
# ----------------------------------------------------------------------

def getLogger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging once (format as in convertJpgToPng.py) and
    return the named logger.
    """
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level))
    return logger


def prefixFor(dryRun: bool) -> str:
    return "...[]" if dryRun else "..."
