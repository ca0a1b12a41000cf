import typer
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.text import Text
from typing import NoReturn, Optional
from .config_loader import ConfigError, ConfigLoader, load_config
from .grouper import IoError, NO_EXTENSION_PLACEHOLDER, render_header, render_report, scan_directory
from .logger import get_logger, log_config_info, set_debug_mode, setup_logger

app = typer.Typer(help="Group the files of a directory by extension", invoke_without_command=True)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(None, "-p", "--path", help="Directory to scan (default: current directory)"),
    header: bool = typer.Option(False, "--header", help="Print the scanned directory before the report"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="YAML settings file"),
    debug: bool = typer.Option(False, "--debug", help="Show debug logging on stderr"),
):
    """Print the files of a directory grouped by extension. Run without command for the current directory."""
    try:
        settings = load_config(config)
    except ConfigError as e:
        _fail(e)

    settings.override(show_header=header or None)

    logger = setup_logger(level=settings.log_level, log_file=settings.log_file)
    if debug:
        set_debug_mode()
    log_config_info(logger, settings.config, settings.config_path)

    ctx.obj = {"settings": settings, "path": path}

    if ctx.invoked_subcommand is None:
        _print_report(path, settings)


@app.command()
def report(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Argument(None, help="Directory to scan (default: current directory)"),
):
    """Print the grouped file report for a directory"""
    _print_report(directory or ctx.obj["path"], ctx.obj["settings"])


@app.command()
def summary(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Argument(None, help="Directory to scan (default: current directory)"),
):
    """Show file counts per extension"""
    try:
        table = scan_directory(directory or ctx.obj["path"])
    except IoError as e:
        _fail(e)

    if not table.total:
        console.print(f"[yellow]No files found in: {table.path}[/yellow]", highlight=False)
        return

    counts = Table(title=Text(f"Files by extension in {table.path}"))
    counts.add_column("Extension", style="cyan", no_wrap=True)
    counts.add_column("Files", style="magenta", justify="right")

    for extension, count in table.counts():
        label = "(no extension)" if extension == NO_EXTENSION_PLACEHOLDER else extension
        counts.add_row(Text(label), str(count))

    console.print(counts)
    console.print(f"Total files: {table.total}", highlight=False)


@app.command()
def info():
    """Show information about the CLI tool"""
    console.print("[bold blue]extgroup - files by extension[/bold blue]")
    console.print("\nLists the regular files of a directory grouped by lowercased extension.")
    console.print("Hidden files and subdirectories are left out.")
    console.print("\nCommands:")
    console.print("  • [cyan]extgroup[/cyan] - Report for the current directory")
    console.print("  • [cyan]extgroup -p <dir>[/cyan] - Report for another directory")
    console.print("  • [cyan]extgroup report <dir>[/cyan] - Report for a directory")
    console.print("  • [cyan]extgroup summary <dir>[/cyan] - File counts per extension")
    console.print("  • [cyan]extgroup info[/cyan] - Show this information")


def _print_report(directory: Optional[Path], settings: ConfigLoader):
    """Scan first, then print, so a failed scan never leaves a partial report"""
    try:
        table = scan_directory(directory)
    except IoError as e:
        _fail(e)

    # color=True keeps escape sequences in filenames when stdout is not a tty
    if settings.show_header:
        typer.echo(render_header(table.path), nl=False, color=True)
    typer.echo(render_report(table), nl=False, color=True)


def _fail(error: Exception) -> NoReturn:
    get_logger().debug(f"Aborting: {error!r}")
    typer.echo(f"An error occurred: {error}", err=True)
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
