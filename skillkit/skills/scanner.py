"""Skill discovery - find every directory holding a SKILL.md under a root"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Protocol

from skillkit.config.schema import DEFAULT_EXCLUDED_DIRS, MANIFEST_NAME

logger = logging.getLogger(__name__)


class DirEntry(Protocol):
    name: str

    def is_dir(self) -> bool: ...


Lister = Callable[[Path], Iterable[DirEntry]]


def scandir_lister(path: Path) -> list[os.DirEntry]:
    """List a directory on the real filesystem."""
    with os.scandir(path) as it:
        return list(it)


class SkillScanner:
    """
    Walks a directory tree and collects skill identifiers.

    A directory is a skill if it directly contains the manifest file.
    The walk keeps descending below a match, so grouped skills such as
    ``mobile/android-expert`` and skills nested inside other skills are
    all reported. Directories named in ``excluded`` are pruned together
    with their whole subtree.

    Identifiers are POSIX relative paths from the scanned root.
    """

    def __init__(
        self,
        manifest_name: str = MANIFEST_NAME,
        excluded: Iterable[str] | None = None,
        lister: Lister | None = None,
    ):
        self.manifest_name = manifest_name
        self.excluded = frozenset(DEFAULT_EXCLUDED_DIRS if excluded is None else excluded)
        self._list = lister or scandir_lister

    def scan(self, root: Path) -> list[str]:
        """Return the sorted identifiers of all skills below ``root``."""
        root = Path(root)
        found: list[str] = []
        stack: list[tuple[Path, tuple[str, ...]]] = [(root, ())]

        while stack:
            directory, parts = stack.pop()
            try:
                entries = list(self._list(directory))
            except (FileNotFoundError, NotADirectoryError) as e:
                if not parts:
                    # Missing root: nothing installed or nothing authored yet
                    return []
                logger.warning(f"Skipping vanished directory {directory}: {e}")
                continue
            except PermissionError as e:
                logger.warning(f"Skipping unreadable directory {directory}: {e}")
                continue

            has_manifest = False
            for entry in entries:
                if entry.name == self.manifest_name and not entry.is_dir():
                    has_manifest = True
                    continue
                if not entry.is_dir():
                    continue
                if entry.name in self.excluded:
                    logger.debug(f"Pruned {directory / entry.name}")
                    continue
                stack.append((directory / entry.name, parts + (entry.name,)))

            if has_manifest and parts:
                found.append("/".join(parts))

        found.sort()
        logger.debug(f"Found {len(found)} skills under {root}")
        return found
