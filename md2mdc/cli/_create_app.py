"""Create the main Typer CLI app."""

import typer

from md2mdc.api.convert.cmd_convert import cmd_convert
from md2mdc.cli._handle_stage_result import _handle_stage_result


def _create_app() -> typer.Typer:
    """Create and configure the md2mdc Typer app."""
    app = typer.Typer(
        name="md2mdc",
        help="Convert markdown documents into Cursor .mdc rule files",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command(name="convert")
    def convert_cmd(
        ctx: typer.Context,
        input_path: str = typer.Argument(..., help="Markdown file or directory to convert"),
        output_path: str = typer.Argument(..., help="Directory to write .mdc files into"),
        link_prefix: str | None = typer.Option(
            None, "--link-prefix", help="Path segment used in rewritten links (default: output directory)"
        ),
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        """Convert a markdown file or directory tree into .mdc documents."""
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        _handle_stage_result(cmd_convert)(input_path=input_path, output_path=output_path, link_prefix=link_prefix)

    return app
