"""Installed skill store"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path, PurePosixPath

from .errors import InvalidIdentifierError, NotInstalledError, RemoveFailedError
from .scanner import SkillScanner

logger = logging.getLogger(__name__)


def normalize_identifier(identifier: str) -> str:
    """Return ``identifier`` as a clean POSIX relative path.

    Raises InvalidIdentifierError for empty or absolute identifiers and
    for any that climb out of their root with ``..``.
    """
    raw = (identifier or "").replace("\\", "/").strip()
    path = PurePosixPath(raw)
    if not raw or path.is_absolute() or ".." in path.parts:
        raise InvalidIdentifierError(identifier)
    parts = [p for p in path.parts if p != "."]
    if not parts:
        raise InvalidIdentifierError(identifier)
    return "/".join(parts)


class SkillStore:
    """The directory tree of installed skills.

    The store keeps no index; its contents are whatever directories
    exist under ``root``.
    """

    def __init__(self, root: Path, scanner: SkillScanner | None = None):
        self.root = Path(root)
        self.scanner = scanner or SkillScanner()

    def path_for(self, identifier: str) -> Path:
        return self.root.joinpath(*normalize_identifier(identifier).split("/"))

    def exists(self, identifier: str) -> bool:
        return self.path_for(identifier).is_dir()

    def list(self) -> list[str]:
        """List installed skills; a store that was never created is empty."""
        if not self.root.exists():
            return []
        return self.scanner.scan(self.root)

    def remove(self, identifier: str) -> Path:
        """Delete an installed skill and any category folders it leaves empty."""
        target = self.path_for(identifier)
        if not target.is_dir() and not target.is_symlink():
            raise NotInstalledError(identifier)

        try:
            if target.is_symlink():
                # Linked skill: drop the link, never the linked directory
                target.unlink()
            else:
                shutil.rmtree(target)
        except OSError as e:
            raise RemoveFailedError(identifier, e) from e
        logger.info(f"Removed skill '{identifier}' from {self.root}")
        self._prune_empty_parents(target.parent)
        return target

    def _prune_empty_parents(self, directory: Path) -> None:
        root = self.root.resolve()
        current = directory
        while current.resolve() != root and root in current.resolve().parents:
            try:
                current.rmdir()
            except OSError:
                # Not empty
                return
            current = current.parent
