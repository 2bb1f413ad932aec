"""
File system traversal: walk directories and collect Swift source files.

Hidden entries (names starting with '.') are never visited, which also skips
SwiftPM's `.build` directory and VCS metadata. Symlinks are never followed, and
files that are not regular or not readable are left out so the linter only ever receives files it can open.

Typical usage:
    from pathlib import Path
    from nslint.traversal import find_swift_files

    for path in find_swift_files(Path("Sources")):
        ...
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Set

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".swift"

# No directories are ignored by name unless the caller asks for it
DEFAULT_IGNORE_DIRS: Set[str] = set()


def is_hidden(path: Path) -> bool:
    """
    Check if a file or directory is hidden (name starts with '.').

    Examples:
        >>> is_hidden(Path(".build"))
        True
        >>> is_hidden(Path("Sources/App.swift"))
        False
    """
    return path.name.startswith(".")


def is_source_file(path: Path, extension: str = DEFAULT_EXTENSION) -> bool:
    """
    Check if a file has the given extension (exact, case-sensitive).

    Examples:
        >>> is_source_file(Path("Strings.swift"))
        True
        >>> is_source_file(Path("Strings.SWIFT"))
        False
    """
    return path.suffix == extension


def should_ignore_directory(dir_path: Path, ignore_dirs: Set[str]) -> bool:
    """Return True if the directory is hidden or its name is in ignore_dirs."""
    return is_hidden(dir_path) or dir_path.name in ignore_dirs


def is_readable_file(path: Path) -> bool:
    """Return True if path is a regular file the current user can read."""
    return path.is_file() and os.access(path, os.R_OK)


def find_source_files(
    root: Path,
    extension: str = DEFAULT_EXTENSION,
    ignore_dirs: Optional[Set[str]] = None,
    filter_fn: Optional[Callable[[Path], bool]] = None,
) -> list[Path]:
    """
    Recursively find all source files with the given extension under root.

    Args:
        root: Root directory to start traversal from.
        extension: File suffix to collect, including the dot.
        ignore_dirs: Directory names to skip in addition to hidden ones.
        filter_fn: Optional additional predicate on each candidate file.

    Returns:
        Matching files, sorted for deterministic ordering.

    Raises:
        FileNotFoundError: If root does not exist.
        NotADirectoryError: If root is not a directory.

    Permission errors on subdirectories are logged and do not stop traversal.
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    if not root.exists():
        logger.error("Root directory does not exist: %s", root)
        raise FileNotFoundError(f"Root directory does not exist: {root}")

    if not root.is_dir():
        logger.error("Root path is not a directory: %s", root)
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    logger.info("Starting traversal from: %s", root)
    logger.debug(
        "Traversal config: extension=%s, ignore_dirs=%s",
        extension,
        ignore_dirs,
    )

    collected_files: list[Path] = []

    def _walk_directory(current_dir: Path) -> None:
        try:
            for entry in current_dir.iterdir():
                if entry.is_symlink():
                    logger.debug("Skipping symlink: %s", entry)
                    continue

                if entry.is_dir():
                    if should_ignore_directory(entry, ignore_dirs):
                        logger.debug("Ignoring directory: %s", entry)
                        continue
                    _walk_directory(entry)

                elif is_source_file(entry, extension) and not is_hidden(entry):
                    if not is_readable_file(entry):
                        logger.warning("Skipping unreadable or non-regular file: %s", entry)
                        continue
                    if filter_fn is not None and not filter_fn(entry):
                        logger.debug("Filtered out by custom filter: %s", entry)
                        continue
                    logger.debug("Found source file: %s", entry)
                    collected_files.append(entry)

        except PermissionError as e:
            logger.warning("Permission denied accessing directory %s: %s", current_dir, e)
        except OSError as e:
            logger.warning("Error accessing directory %s: %s", current_dir, e)

    _walk_directory(root)
    collected_files.sort()

    logger.info(
        "Traversal complete: found %d source file(s) in %s",
        len(collected_files),
        root,
    )
    return collected_files


def find_swift_files(
    root: Path,
    ignore_dirs: Optional[Set[str]] = None,
) -> list[Path]:
    """Recursively find all readable, non-hidden .swift files under root, sorted."""
    return find_source_files(
        root=root,
        extension=DEFAULT_EXTENSION,
        ignore_dirs=ignore_dirs,
    )
