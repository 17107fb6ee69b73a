"""Shared fixtures for skillkit tests"""

from pathlib import Path

import pytest

from skillkit.config import SkillkitConfig


def write_skill(root: Path, identifier: str, extra: dict[str, str] | None = None) -> Path:
    """Create a skill directory with a SKILL.md and optional extra files."""
    skill_dir = root.joinpath(*identifier.split("/"))
    skill_dir.mkdir(parents=True, exist_ok=True)
    (skill_dir / "SKILL.md").write_text(f"# {identifier}\n")
    for rel, content in (extra or {}).items():
        path = skill_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return skill_dir


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    path = tmp_path / "repo"
    path.mkdir()
    return path


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    return tmp_path / "store"


@pytest.fixture
def config(repo_dir: Path, store_dir: Path) -> SkillkitConfig:
    return SkillkitConfig(store_dir=store_dir, repo_dir=repo_dir)
