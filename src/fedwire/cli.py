import logging
from pathlib import Path

import orjson
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fedwire.codec.fields import FormatOptions
from fedwire.config import CodecConfig, load_config
from fedwire.errors import ParseError, WireError
from fedwire.reader import Reader
from fedwire.sample import sample_message

app = typer.Typer(help="Parse, validate and format Fedwire funds-transfer messages.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise typer.BadParameter(f"Input file not found: {path}")
    return path.read_text()


def _load(config: Path | None) -> CodecConfig:
    if config is None:
        return CodecConfig()
    if not config.is_file():
        raise typer.BadParameter(f"Config file not found: {config}")
    return load_config(config)


def _emit(payload: object, output: Path | None) -> None:
    if output:
        output.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
        console.print(f"[bold green]Wrote[/] {output}")
    else:
        console.print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


@app.command()
def parse(
    input: Path = typer.Argument(..., help="Fedwire message text to decode."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Optional JSON output path."),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML/JSON codec config."),
) -> None:
    """Decode a message into JSON, one object per record."""
    cfg = _load(config)
    reader = Reader(_read_text(input), config=cfg)
    try:
        message = reader.read()
    except ParseError as err:
        console.print(f"[bold red]Parse error[/] {escape(str(err))}")
        _emit({"error": err.to_dict(), "partial": reader.message.to_dict()}, output)
        raise typer.Exit(code=1) from err
    _emit(message.to_dict(), output)


@app.command()
def validate(
    input: Path = typer.Argument(..., help="Fedwire message text to validate."),
    mandatory: bool = typer.Option(
        True, "--mandatory/--no-mandatory", help="Require the mandatory header tags."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML/JSON codec config."),
) -> None:
    """Report every field error in a message."""
    cfg = _load(config)
    cfg.validate_on_read = False
    cfg.require_mandatory_tags = False
    try:
        message = Reader(_read_text(input), config=cfg).read()
    except ParseError as err:
        console.print(f"[bold red]Parse error[/] {escape(str(err))}")
        raise typer.Exit(code=1) from err

    report = message.validation_report(require_mandatory=mandatory)
    if not report:
        console.print(f"[bold green]Valid[/] {len(message)} records")
        return

    table = Table(title=f"{len(report)} validation errors")
    for column in ("tag", "record", "field", "kind", "value"):
        table.add_column(column)
    for row in report:
        table.add_row(
            row["tag"], row["record"], row["field"] or "", row["kind"], row["value"] or ""
        )
    console.print(table)
    raise typer.Exit(code=1)


@app.command("format")
def format_message(
    input: Path = typer.Argument(..., help="Fedwire message text to re-encode."),
    variable: bool | None = typer.Option(
        None, "--variable/--fixed", help="Variable-length (delimited) or fixed-width output."
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Optional output path."),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML/JSON codec config."),
) -> None:
    """Re-encode a message in fixed-width or variable-length form."""
    cfg = _load(config)
    if variable is not None:
        cfg.variable_length_fields = variable
    try:
        message = Reader(_read_text(input), config=cfg).read()
    except WireError as err:
        console.print(f"[bold red]Parse error[/] {escape(str(err))}")
        raise typer.Exit(code=1) from err
    text = message.format(cfg.format_options())
    if output:
        output.write_text(text)
        console.print(f"[bold green]Wrote[/] {len(message)} records to {output}")
    else:
        typer.echo(text, nl=False)


@app.command()
def sample(
    output: Path | None = typer.Option(None, "--output", "-o", help="Optional output path."),
    variable: bool = typer.Option(False, "--variable/--fixed", help="Output mode."),
) -> None:
    """Emit a complete sample message that passes validation."""
    text = sample_message().format(FormatOptions(variable_length_fields=variable, newline=True))
    if output:
        output.write_text(text)
        console.print(f"[bold green]Wrote sample message[/] to {output}")
    else:
        typer.echo(text, nl=False)


if __name__ == "__main__":
    app()
