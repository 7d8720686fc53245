"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from doclinks.api.config.ConfigError import ConfigError
    from doclinks.api.config.DoclinksConfig import DoclinksConfig
    from doclinks.cli._create_app import _create_app
    from doclinks.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["--version"], ["-v"]):
        from doclinks.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"doclinks {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    try:
        level = DoclinksConfig.load().log.level
    except ConfigError:
        # The command itself reports the invalid config
        level = "INFO"
    configure_logging(level=level)

    app = _create_app()
    try:
        code = app(argv, standalone_mode=False)
        return code if isinstance(code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        typer.echo("\nUsage:\n\tdoclinks check <path to folder>", err=True)
        return 1
