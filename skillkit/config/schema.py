"""Configuration schema using Pydantic"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_STORE_DIR = Path.home() / ".gemini" / "antigravity" / "skills"
PACKAGE_PARENT = Path(__file__).resolve().parents[2]
CHECKOUT_MARKERS = ("pyproject.toml", ".git")

MANIFEST_NAME = "SKILL.md"

DEFAULT_EXCLUDED_DIRS = [
    ".git", "node_modules", "bin", "__pycache__",
    ".venv", "venv", ".pytest_cache", ".tox", "skillkit",
]


def default_repo_dir(package_parent: Path = PACKAGE_PARENT) -> Path:
    """The checkout holding the skillkit package, else the working directory.

    A regular install puts the package in site-packages, which must never
    be scanned for skills.
    """
    if any((package_parent / marker).exists() for marker in CHECKOUT_MARKERS):
        return package_parent
    return Path.cwd()


class SkillkitConfig(BaseModel):
    """Locations and conventions shared by every skill command"""
    store_dir: Path = DEFAULT_STORE_DIR
    repo_dir: Path = Field(default_factory=default_repo_dir)
    manifest_name: str = MANIFEST_NAME
    excluded_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS))
    git_executable: str = "git"

    @field_validator("store_dir", "repo_dir", mode="after")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("manifest_name")
    @classmethod
    def _bare_filename(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError("must be a bare filename")
        return value
