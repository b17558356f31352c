"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from md2mdc.api.config.get_package_version import get_package_version
    from md2mdc.cli._create_app import _create_app
    from md2mdc.utils import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"md2mdc {get_package_version()}")
        return 0

    configure_logging()

    app = _create_app()
    try:
        rc = app(argv, prog_name="md2mdc", standalone_mode=False)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rc if isinstance(rc, int) else 0
