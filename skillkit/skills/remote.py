"""
Remote skill installation - shallow-clone a git repository and install
a skill from it.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path, PurePosixPath
from typing import Optional, Protocol

from skillkit.config.schema import MANIFEST_NAME

from .errors import FetchFailedError, InvalidIdentifierError, InvalidSkillError
from .install import InstallResult, SkillInstaller
from .store import normalize_identifier

logger = logging.getLogger(__name__)

REMOTE_PREFIXES = ("http://", "https://", "ssh://", "git://", "git@")


def is_remote_source(source: str) -> bool:
    """True if ``source`` names a git remote rather than a local skill."""
    return source.startswith(REMOTE_PREFIXES) or source.rstrip("/").endswith(".git")


def repo_name_from_url(url: str) -> str:
    """Last path component of a repository URL, without ``.git``."""
    tail = url.rstrip("/")
    # git@host:owner/repo.git
    tail = tail.rsplit("/", 1)[-1].rsplit(":", 1)[-1]
    if tail.endswith(".git"):
        tail = tail[:-4]
    return tail


class Cloner(Protocol):
    def clone(self, url: str, dest: Path) -> None: ...


class GitCloner:
    """Clones repositories with the git command line client."""

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def clone(self, url: str, dest: Path) -> None:
        cmd = [self.executable, 'clone', '--depth', '1', url, str(dest)]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            subprocess.run(cmd, check=True, capture_output=True)
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode(errors="replace") if e.stderr else ""
            raise FetchFailedError(url, stderr) from e
        except FileNotFoundError as e:
            raise FetchFailedError(url, f"{self.executable} executable not found") from e


class RemoteFetcher:
    """
    Installs skills that live in remote git repositories.

    Every call clones into its own temporary directory and removes it
    before returning, whether the install succeeded or not.
    """

    def __init__(
        self,
        installer: SkillInstaller,
        cloner: Optional[Cloner] = None,
        manifest_name: str = MANIFEST_NAME,
        temp_dir: Optional[Path] = None,
    ):
        self.installer = installer
        self.cloner = cloner or GitCloner()
        self.manifest_name = manifest_name
        self.temp_dir = temp_dir

    def fetch_and_install(
        self,
        remote_url: str,
        identifier: Optional[str] = None,
        subpath: Optional[str] = None,
    ) -> InstallResult:
        """
        Clone ``remote_url`` and install one skill from it.

        Args:
            remote_url: Repository to clone
            identifier: Store identifier (default: basename of subpath, or
                the repository name)
            subpath: Skill directory inside the repository (default: root)

        Returns:
            InstallResult from the installer
        """
        tmp = Path(tempfile.mkdtemp(prefix="skillkit-clone-", dir=self.temp_dir))
        logger.debug(f"Cloning {remote_url} into {tmp}")
        try:
            repo_dir = tmp / 'repo'
            self.cloner.clone(remote_url, repo_dir)

            source_dir, default_id = self._resolve(repo_dir, remote_url, subpath)
            target_id = identifier or default_id

            if not (source_dir / self.manifest_name).is_file():
                where = subpath or remote_url
                raise InvalidSkillError(target_id, f"{self.manifest_name} not found at {where}")

            return self.installer.install_from(source_dir, target_id)
        finally:
            shutil.rmtree(tmp, ignore_errors=True)
            if tmp.exists():
                logger.warning(f"Could not fully remove temporary clone {tmp}")
            else:
                logger.debug(f"Removed temporary clone {tmp}")

    def _resolve(self, repo_dir: Path, url: str, subpath: Optional[str]) -> tuple[Path, str]:
        if not subpath:
            return repo_dir, repo_name_from_url(url)
        try:
            clean = normalize_identifier(subpath)
        except InvalidIdentifierError as e:
            raise InvalidSkillError(subpath, f"Invalid path inside repository: '{subpath}'") from e
        return repo_dir.joinpath(*clean.split("/")), PurePosixPath(clean).name
