"""Skills CLI"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from skillkit.config import ConfigError, load_config
from skillkit.skills import InstallResult, SkillError, SkillManager

app = typer.Typer(
    name="skills",
    help="Install and manage agent skills",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

RESTART_HINT = "\nDone! Restart the agent to see changes."


def _setup_logging(verbose: bool) -> None:
    logger = logging.getLogger("skillkit")
    logger.handlers.clear()
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _manager(ctx: typer.Context) -> SkillManager:
    return ctx.obj


def _fail(message: str) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    store: Optional[Path] = typer.Option(None, "--store", help="Directory installed skills live in"),
    repo: Optional[Path] = typer.Option(None, "--repo", help="Local repository to read skills from"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Install and manage agent skills"""
    _setup_logging(verbose)
    if ctx.obj is not None:
        return
    try:
        settings = load_config(config, {"store_dir": store, "repo_dir": repo})
    except ConfigError as e:
        _fail(str(e))
    ctx.obj = SkillManager(settings)


def _print_skills(title: str, skills: list[str], style: str) -> None:
    if not skills:
        console.print(f"[bold]{title}[/bold]")
        console.print("[yellow] None.[/yellow]\n")
        return
    table = Table(title=title, title_justify="left")
    table.add_column("Skill", style=style)
    for skill in skills:
        table.add_row(skill)
    console.print(table)
    console.print()


@app.command("list")
def list_skills(ctx: typer.Context):
    """List local and installed skills"""
    manager = _manager(ctx)
    _print_skills(f"Available in local repo ({manager.repo_dir})", manager.list_local(), "cyan")
    _print_skills(f"Currently installed ({manager.store.root})", manager.list_installed(), "green")


def _report_install(result: InstallResult) -> None:
    if result.skipped:
        console.print(f"[yellow]Skipping: skill '{result.identifier}' already exists.[/yellow]")
    else:
        console.print(f"[green]Skill '{result.identifier}' installed![/green]")


def _run_sync(manager: SkillManager) -> None:
    console.print("Installing all local skills...")
    report = manager.sync()
    for identifier in report.installed:
        console.print(f"[green]Skill '{identifier}' installed![/green]")
    for identifier in report.skipped:
        console.print(f"[yellow]Skipping: skill '{identifier}' already exists.[/yellow]")
    for identifier, message in report.failed.items():
        err_console.print(f"[red]Failed: {identifier}: {escape(message)}[/red]")
    console.print(
        f"\n{len(report.installed)} installed, {len(report.skipped)} skipped, "
        f"{len(report.failed)} failed"
    )
    console.print(RESTART_HINT)


def _run_add(manager: SkillManager, source: str, skill: Optional[str], path: Optional[str]) -> None:
    try:
        result = manager.add(source, name=skill, subpath=path)
    except SkillError as e:
        _fail(str(e))
    _report_install(result)
    console.print(RESTART_HINT)


@app.command("sync")
def sync(ctx: typer.Context):
    """Install all local skills"""
    _run_sync(_manager(ctx))


@app.command("install")
def install(
    ctx: typer.Context,
    target: Optional[str] = typer.Argument(None, help="Local skill path or git URL (default: all local skills)"),
    skill: Optional[str] = typer.Option(None, "--skill", help="Name to install a remote skill under"),
    path: Optional[str] = typer.Option(None, "--path", help="Skill directory inside the remote repository"),
):
    """Install all local skills, or a single one"""
    manager = _manager(ctx)
    if target is None:
        _run_sync(manager)
    else:
        _run_add(manager, target, skill, path)


@app.command("add")
def add(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Local skill path (e.g. web/seo) or git URL"),
    skill: Optional[str] = typer.Option(None, "--skill", help="Name to install a remote skill under"),
    path: Optional[str] = typer.Option(None, "--path", help="Skill directory inside the remote repository"),
):
    """Install a specific skill"""
    _run_add(_manager(ctx), source, skill, path)


@app.command("remove")
def remove(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Installed skill to remove"),
):
    """Remove an installed skill"""
    try:
        _manager(ctx).remove(name)
    except SkillError as e:
        _fail(str(e))
    console.print(f"[green]Skill '{name}' removed.[/green]")


app.command("rm", hidden=True)(remove)


@app.command("help", hidden=True)
def help_command(ctx: typer.Context):
    """Show usage"""
    typer.echo(ctx.parent.get_help())


if __name__ == "__main__":
    app()
