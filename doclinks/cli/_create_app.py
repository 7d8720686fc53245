"""Create the main Typer CLI app."""

import typer

from doclinks.api.config.cmd_show import cmd_show as cmd_config_show
from doclinks.api.scan.cmd_check import cmd_check
from doclinks.api.scan.cmd_show import cmd_show
from doclinks.cli._handle_stage_result import _handle_stage_result


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Documentation link checker",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1)

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Directory to scan for Markdown files"),
    ) -> None:
        """Check every Markdown file below a directory for broken links."""
        _handle_stage_result(cmd_check)(path=path)

    @app.command(name="show")
    def show_cmd(
        path: str = typer.Argument(..., help="Markdown file to list links of"),
    ) -> None:
        """List the links, anchors and node kinds of one Markdown file."""
        _handle_stage_result(cmd_show)(path=path)

    @app.command(name="config")
    def config_cmd() -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_config_show)()

    return app
