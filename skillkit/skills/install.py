"""
Skill installation - copy skill directories into the store.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from skillkit.config.schema import MANIFEST_NAME

from .errors import CopyFailedError, InvalidSkillError, SkillNotFoundError
from .store import SkillStore, normalize_identifier

logger = logging.getLogger(__name__)


class InstallStatus(str, Enum):
    INSTALLED = "installed"
    SKIPPED = "skipped"


@dataclass
class InstallResult:
    identifier: str
    status: InstallStatus
    path: Optional[Path] = None

    @property
    def skipped(self) -> bool:
        return self.status == InstallStatus.SKIPPED


class SkillInstaller:
    """
    Copies skills into a SkillStore.

    Installation is at-most-once: when the store already holds the
    identifier the call reports SKIPPED and leaves the installed copy
    alone, so local edits to installed skills are never overwritten.
    """

    def __init__(self, store: SkillStore, manifest_name: str = MANIFEST_NAME):
        self.store = store
        self.manifest_name = manifest_name

    def install(self, source_root: Path, identifier: str) -> InstallResult:
        """
        Install the skill at ``source_root/identifier``.

        Args:
            source_root: Root the identifier is relative to
            identifier: Relative path of the skill, kept as-is in the store

        Returns:
            InstallResult with INSTALLED or SKIPPED status

        Raises:
            SkillNotFoundError: the path does not exist
            InvalidSkillError: the path has no manifest
            CopyFailedError: the copy into the store failed
        """
        identifier = normalize_identifier(identifier)
        source = Path(source_root).joinpath(*identifier.split("/"))
        if not source.exists():
            raise SkillNotFoundError(identifier)
        return self.install_from(source, identifier)

    def install_from(self, source_dir: Path, identifier: str) -> InstallResult:
        """Install an explicit skill directory under ``identifier``."""
        identifier = normalize_identifier(identifier)
        source_dir = Path(source_dir)

        if not source_dir.is_dir():
            raise SkillNotFoundError(identifier)
        if not (source_dir / self.manifest_name).is_file():
            raise InvalidSkillError(
                identifier, f"Path '{identifier}' does not contain {self.manifest_name}"
            )

        target = self.store.path_for(identifier)
        if self.store.exists(identifier):
            logger.info(f"Skipping: skill '{identifier}' already exists")
            return InstallResult(identifier=identifier, status=InstallStatus.SKIPPED, path=target)

        if not self._copy(source_dir, target, identifier):
            logger.info(f"Skipping: skill '{identifier}' appeared while installing")
            return InstallResult(identifier=identifier, status=InstallStatus.SKIPPED, path=target)
        logger.info(f"Skill '{identifier}' installed to {target}")
        return InstallResult(identifier=identifier, status=InstallStatus.INSTALLED, path=target)

    def _copy(self, source_dir: Path, target: Path, identifier: str) -> bool:
        """Copy into the store; False if another install got there first."""
        # Copy next to the target and rename, so a failed copy never shows
        # up in the store as a half-installed skill.
        staging = target.with_name(f".{target.name}.partial-{uuid.uuid4().hex[:8]}")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copytree(source_dir, staging, symlinks=True)
            staging.rename(target)
        except (OSError, shutil.Error) as e:
            shutil.rmtree(staging, ignore_errors=True)
            if target.is_dir():
                return False
            raise CopyFailedError(identifier, e) from e
        return True
