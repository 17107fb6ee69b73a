"""Skill manager - the operations behind each CLI command"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from skillkit.config.schema import SkillkitConfig

from .errors import SkillError
from .install import InstallResult, InstallStatus, SkillInstaller
from .remote import Cloner, GitCloner, RemoteFetcher, is_remote_source
from .scanner import SkillScanner
from .store import SkillStore

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Outcome of installing every local skill"""
    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.installed) + len(self.skipped) + len(self.failed)


class SkillManager:
    """
    Wires scanner, store, installer and fetcher from one configuration.

    Two roots are involved:
    - the local repository (``config.repo_dir``), where skills are authored
    - the store (``config.store_dir``), where the agent runtime reads them
    """

    def __init__(self, config: SkillkitConfig, cloner: Optional[Cloner] = None):
        self.config = config
        self.scanner = SkillScanner(
            manifest_name=config.manifest_name,
            excluded=config.excluded_dirs,
        )
        self.store = SkillStore(config.store_dir, self.scanner)
        self.installer = SkillInstaller(self.store, config.manifest_name)
        self.fetcher = RemoteFetcher(
            self.installer,
            cloner=cloner or GitCloner(config.git_executable),
            manifest_name=config.manifest_name,
        )

    @property
    def repo_dir(self) -> Path:
        return self.config.repo_dir

    def list_local(self) -> list[str]:
        return self.scanner.scan(self.repo_dir)

    def list_installed(self) -> list[str]:
        return self.store.list()

    def sync(self) -> SyncReport:
        """Install every skill found in the local repository.

        A failing skill is recorded in the report and the rest still run.
        """
        report = SyncReport()
        for identifier in self.list_local():
            try:
                result = self.installer.install(self.repo_dir, identifier)
            except SkillError as e:
                logger.info(f"Failed to install '{identifier}': {e}")
                report.failed[identifier] = str(e)
                continue

            if result.status == InstallStatus.SKIPPED:
                report.skipped.append(identifier)
            else:
                report.installed.append(identifier)

        logger.info(
            f"Sync finished: {len(report.installed)} installed, "
            f"{len(report.skipped)} skipped, {len(report.failed)} failed"
        )
        return report

    def add(
        self,
        source: str,
        name: Optional[str] = None,
        subpath: Optional[str] = None,
    ) -> InstallResult:
        """Install one skill from a local identifier or a git URL.

        Local sources must name a skill directory exactly; there is no
        search below them.
        """
        if is_remote_source(source):
            return self.fetcher.fetch_and_install(source, identifier=name, subpath=subpath)

        if name or subpath:
            raise SkillError("--skill and --path only apply to remote sources")
        return self.installer.install(self.repo_dir, source)

    def remove(self, identifier: str) -> Path:
        return self.store.remove(identifier)
