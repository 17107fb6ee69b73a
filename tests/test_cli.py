"""Tests for the skills command line"""

import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from skillkit.cli import app
from skillkit.skills import SkillManager

from conftest import write_skill

runner = CliRunner()


class FixtureCloner:
    def __init__(self, fixture: Path):
        self.fixture = fixture

    def clone(self, url: str, dest: Path) -> None:
        shutil.copytree(self.fixture, dest)


@pytest.fixture
def manager(config):
    return SkillManager(config)


def invoke(manager, *args):
    return runner.invoke(app, list(args), obj=manager)


class TestListCommand:
    """Test the list command"""

    def test_lists_both_roots(self, manager, repo_dir, store_dir):
        write_skill(repo_dir, "web/seo")
        write_skill(store_dir, "tools")

        result = invoke(manager, "list")

        assert result.exit_code == 0
        assert "web/seo" in result.stdout
        assert "tools" in result.stdout

    def test_empty(self, manager):
        result = invoke(manager, "list")
        assert result.exit_code == 0
        assert "None." in result.stdout


class TestSyncCommand:
    """Test sync and install without a target"""

    def test_sync(self, manager, repo_dir, store_dir):
        write_skill(repo_dir, "mobile/android-expert")

        result = invoke(manager, "sync")

        assert result.exit_code == 0
        assert (store_dir / "mobile" / "android-expert" / "SKILL.md").is_file()
        assert "1 installed" in result.stdout

    def test_install_without_target_syncs(self, manager, repo_dir, store_dir):
        write_skill(repo_dir, "web/seo")
        result = invoke(manager, "install")
        assert result.exit_code == 0
        assert (store_dir / "web" / "seo").is_dir()

    def test_sync_exit_zero_with_failures(self, manager, repo_dir, monkeypatch):
        write_skill(repo_dir, "a")

        def broken_copytree(*args, **kwargs):
            raise OSError("boom")

        monkeypatch.setattr(shutil, "copytree", broken_copytree)

        result = invoke(manager, "sync")

        assert result.exit_code == 0
        assert manager.list_installed() == []


    def test_failure_reported_once(self, manager, repo_dir, monkeypatch):
        write_skill(repo_dir, "a")

        def broken_copytree(*args, **kwargs):
            raise OSError("disk on fire")

        monkeypatch.setattr(shutil, "copytree", broken_copytree)

        result = invoke(manager, "sync")

        assert result.exit_code == 0
        assert result.output.count("disk on fire") == 1


class TestAddCommand:
    """Test adding local and remote skills"""

    def test_add_local(self, manager, repo_dir, store_dir):
        write_skill(repo_dir, "web/seo")
        result = invoke(manager, "add", "web/seo")
        assert result.exit_code == 0
        assert "installed" in result.stdout
        assert (store_dir / "web" / "seo").is_dir()

    def test_add_existing_is_skipped(self, manager, repo_dir, store_dir):
        write_skill(repo_dir, "web/seo")
        write_skill(store_dir, "web/seo")
        result = invoke(manager, "add", "web/seo")
        assert result.exit_code == 0
        assert "Skipping" in result.stdout

    def test_add_missing(self, manager):
        result = invoke(manager, "add", "nope")
        assert result.exit_code == 1

    def test_add_without_manifest(self, manager, repo_dir):
        (repo_dir / "mobile").mkdir()
        result = invoke(manager, "add", "mobile")
        assert result.exit_code == 1

    def test_install_with_target_adds(self, manager, repo_dir, store_dir):
        write_skill(repo_dir, "tools")
        result = invoke(manager, "install", "tools")
        assert result.exit_code == 0
        assert (store_dir / "tools").is_dir()

    def test_add_remote(self, config, tmp_path, store_dir):
        remote = tmp_path / "remote"
        write_skill(remote, "skills/pdf")
        manager = SkillManager(config, cloner=FixtureCloner(remote))

        result = invoke(manager, "add", "https://github.com/o/r", "--path", "skills/pdf", "--skill", "docs/pdf")

        assert result.exit_code == 0
        assert (store_dir / "docs" / "pdf" / "SKILL.md").is_file()

    def test_add_remote_invalid(self, config, tmp_path):
        remote = tmp_path / "remote"
        remote.mkdir()
        manager = SkillManager(config, cloner=FixtureCloner(remote))

        result = invoke(manager, "add", "https://github.com/o/r")

        assert result.exit_code == 1


class TestRemoveCommand:
    """Test remove and its rm alias"""

    def test_remove(self, manager, store_dir):
        write_skill(store_dir, "web/seo")
        result = invoke(manager, "remove", "web/seo")
        assert result.exit_code == 0
        assert not (store_dir / "web" / "seo").exists()

    def test_rm_alias(self, manager, store_dir):
        write_skill(store_dir, "tools")
        result = invoke(manager, "rm", "tools")
        assert result.exit_code == 0
        assert not (store_dir / "tools").exists()

    def test_remove_symlinked_skill(self, manager, tmp_path, store_dir):
        real = write_skill(tmp_path / "checkout", "mine")
        store_dir.mkdir()
        (store_dir / "mine").symlink_to(real, target_is_directory=True)

        result = invoke(manager, "remove", "mine")

        assert result.exit_code == 0
        assert result.exception is None
        assert not (store_dir / "mine").is_symlink()
        assert (real / "SKILL.md").is_file()

    def test_remove_nonexistent(self, manager):
        result = invoke(manager, "remove", "nonexistent")
        assert result.exit_code == 1


class TestGlobalOptions:
    """Test options shared by every command"""

    def test_store_and_repo_flags(self, tmp_path):
        repo = tmp_path / "my-repo"
        store = tmp_path / "my-store"
        write_skill(repo, "web/seo")

        result = runner.invoke(app, [
            "--store", str(store),
            "--repo", str(repo),
            "--config", str(tmp_path / "none.json"),
            "sync",
        ])

        assert result.exit_code == 0
        assert (store / "web" / "seo" / "SKILL.md").is_file()

    def test_bad_config_exits_one(self, tmp_path):
        bad = tmp_path / "config.json"
        bad.write_text("{")
        result = runner.invoke(app, ["--config", str(bad), "list"])
        assert result.exit_code == 1

    def test_unknown_command(self):
        result = runner.invoke(app, ["frobnicate"])
        assert result.exit_code != 0

    def test_help_verb(self, manager):
        result = invoke(manager, "help")
        assert result.exit_code == 0
        assert "sync" in result.output
