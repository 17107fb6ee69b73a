"""Skill discovery, installation and removal"""

from .errors import (
    SkillError,
    SkillNotFoundError,
    InvalidSkillError,
    InvalidIdentifierError,
    NotInstalledError,
    CopyFailedError,
    RemoveFailedError,
    FetchFailedError,
)
from .scanner import SkillScanner
from .store import SkillStore, normalize_identifier
from .install import SkillInstaller, InstallResult, InstallStatus
from .remote import RemoteFetcher, GitCloner, Cloner, is_remote_source, repo_name_from_url
from .manager import SkillManager, SyncReport

__all__ = [
    "SkillManager",
    "SyncReport",
    "SkillScanner",
    "SkillStore",
    "SkillInstaller",
    "InstallResult",
    "InstallStatus",
    "RemoteFetcher",
    "GitCloner",
    "Cloner",
    "is_remote_source",
    "repo_name_from_url",
    "normalize_identifier",
    "SkillError",
    "SkillNotFoundError",
    "InvalidSkillError",
    "InvalidIdentifierError",
    "NotInstalledError",
    "CopyFailedError",
    "RemoveFailedError",
    "FetchFailedError",
]
