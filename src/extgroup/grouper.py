"""
Directory grouping for extgroup
Scans a single directory and groups its regular files by extension
"""

import os
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Group key for files without an extension
NO_EXTENSION_PLACEHOLDER = ":"


class IoError(Exception):
    """Failure to resolve, open or read the scanned directory"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


def is_hidden(filename: str) -> bool:
    """Hidden files are the ones whose name starts with a dot"""
    return filename.startswith(".")


def extension_key(filename: str) -> str:
    """Return the group key of a filename.

    The key is the lowercased text after the last dot. Names without a dot,
    names whose only dot is the leading one (".env") and ".." have no
    extension and get NO_EXTENSION_PLACEHOLDER. A trailing dot ("notes.")
    gives the empty extension "".
    """
    if filename == "..":
        return NO_EXTENSION_PLACEHOLDER

    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem:
        return NO_EXTENSION_PLACEHOLDER

    return extension.lower()


def _is_text(filename: str) -> bool:
    # os.scandir hands back undecodable bytes as surrogate escapes
    try:
        filename.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass
class GroupTable:
    """Filenames grouped by extension key"""

    path: str
    files_by_extension: Dict[str, List[str]] = field(default_factory=dict)

    def add(self, filename: str) -> str:
        key = extension_key(filename)
        self.files_by_extension.setdefault(key, []).append(filename)
        return key

    def groups(self) -> List[Tuple[str, List[str]]]:
        """(key, filenames) pairs, keys ascending and filenames ascending"""
        return [
            (key, sorted(self.files_by_extension[key]))
            for key in sorted(self.files_by_extension)
        ]

    def counts(self) -> List[Tuple[str, int]]:
        return [(key, len(filenames)) for key, filenames in self.groups()]

    @property
    def total(self) -> int:
        return sum(len(filenames) for filenames in self.files_by_extension.values())

    def __len__(self) -> int:
        return len(self.files_by_extension)

    def __contains__(self, key: str) -> bool:
        return key in self.files_by_extension

    def __iter__(self) -> Iterator[Tuple[str, List[str]]]:
        return iter(self.groups())


def resolve_directory(path: Optional[Union[str, os.PathLike]] = None) -> str:
    """Absolute path of the directory to scan, the working directory by default"""
    try:
        if path is None:
            return os.getcwd()
        return os.path.abspath(os.fspath(path))
    except OSError as e:
        raise IoError(str(e), path) from e


def scan_directory(path: Optional[Union[str, os.PathLike]] = None) -> GroupTable:
    """Group the regular, non-hidden files of a directory by extension.

    Subdirectories are not entered. Any error while opening the directory
    or reading one of its entries aborts the whole scan with IoError.
    """
    directory = resolve_directory(path)
    table = GroupTable(path=directory)
    skipped = defaultdict(int)

    logger.debug(f"Scanning directory: {directory}")

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                filename = entry.name
                # Name check first, hidden entries are never stat'ed
                if is_hidden(filename):
                    skipped["hidden"] += 1
                    continue

                if not entry.is_file():
                    skipped["not a file"] += 1
                    continue

                if not _is_text(filename):
                    logger.debug(f"Skipping undecodable filename: {filename!r}")
                    skipped["undecodable"] += 1
                    continue

                key = table.add(filename)
                logger.debug(f"{filename} -> {key}")
    except OSError as e:
        logger.debug(f"Scan of {directory} failed: {e}")
        raise IoError(str(e), directory) from e

    logger.info(f"Grouped {table.total} files into {len(table)} extensions")
    if skipped:
        logger.debug(f"Skipped entries: {dict(skipped)}")

    return table


def render_report(table: GroupTable) -> str:
    """Text report: a "<key>:" header, "- <filename>" lines, then a blank line per group"""
    lines = []
    for extension, filenames in table.groups():
        lines.append(f"{extension}:")
        for filename in filenames:
            lines.append(f"- {filename}")
        lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def render_header(path: str) -> str:
    return f"Scanning directory: {path}\n\n"
