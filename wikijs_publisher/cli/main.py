"""Main CLI entry point for the wikijs-publish command.

This module provides the Typer application: `publish` sends one Markdown
file to Wiki.js, `test-connection` checks the stored URL and token, and the
`config` group edits the stored settings.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from wikijs_publisher import __version__
from wikijs_publisher.cli.config_command import ConfigCommand
from wikijs_publisher.cli.output import OutputHandler
from wikijs_publisher.cli.publish_command import PublishCommand
from wikijs_publisher.settings.settings_store import SettingsStore

app = typer.Typer(
    name="wikijs-publish",
    help="""Publish local Markdown notes to Wiki.js.

QUICK START:
  wikijs-publish config set-url https://wiki.example.com/graphql
  wikijs-publish config set-token <api-key>
  wikijs-publish test-connection
  wikijs-publish publish notes/Intro.md --vault .""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

config_app = typer.Typer(
    help="Show or edit the stored Wiki.js settings.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'wikijs_publisher' namespace logger to avoid
    affecting third-party libraries.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("wikijs_publisher")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"wikijs-publish_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wikijs-publish version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: str = typer.Option(
        SettingsStore.DEFAULT_PATH,
        "--config",
        "-c",
        help="Path to the settings YAML file",
        metavar="PATH",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Publish local Markdown notes to Wiki.js."""
    _configure_logging(verbosity, logdir)
    ctx.obj = {
        'config': config,
        'output': OutputHandler(verbosity=verbosity, no_color=no_color),
    }


@app.command("publish")
def publish_command(
    ctx: typer.Context,
    file: str = typer.Argument(..., help="Markdown file to publish"),
    vault: Optional[str] = typer.Option(
        None,
        "--vault",
        help="Vault root; the remote path is the file's path relative to it (default: current directory)",
        metavar="DIR",
    ),
) -> None:
    """Publish the page to Wiki.js (update if the title exists, else create)."""
    cmd = PublishCommand(settings_path=ctx.obj['config'], output_handler=ctx.obj['output'])
    raise typer.Exit(cmd.run(file, vault_root=vault))


@app.command("test-connection")
def test_connection_command(ctx: typer.Context) -> None:
    """List Wiki.js pages to check the API URL and token."""
    cmd = PublishCommand(settings_path=ctx.obj['config'], output_handler=ctx.obj['output'])
    raise typer.Exit(cmd.test_connection())


@config_app.command("set-url")
def set_url_command(
    ctx: typer.Context,
    api_url: str = typer.Argument(..., help="Wiki.js GraphQL API URL"),
) -> None:
    """Store the Wiki.js GraphQL API URL."""
    cmd = ConfigCommand(settings_path=ctx.obj['config'], output_handler=ctx.obj['output'])
    raise typer.Exit(cmd.set_url(api_url))


@config_app.command("set-token")
def set_token_command(
    ctx: typer.Context,
    bearer_token: str = typer.Argument(..., help="Wiki.js API key"),
) -> None:
    """Store the Wiki.js API bearer token."""
    cmd = ConfigCommand(settings_path=ctx.obj['config'], output_handler=ctx.obj['output'])
    raise typer.Exit(cmd.set_token(bearer_token))


@config_app.command("set-debug")
def set_debug_command(
    ctx: typer.Context,
    enabled: bool = typer.Argument(..., help="true to show diagnostic lines while publishing"),
) -> None:
    """Turn diagnostic publish output on or off."""
    cmd = ConfigCommand(settings_path=ctx.obj['config'], output_handler=ctx.obj['output'])
    raise typer.Exit(cmd.set_debug(enabled))


@config_app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show the effective settings (token masked)."""
    cmd = ConfigCommand(settings_path=ctx.obj['config'], output_handler=ctx.obj['output'])
    raise typer.Exit(cmd.show())


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m wikijs_publisher.cli.main
if __name__ == "__main__":
    main()
