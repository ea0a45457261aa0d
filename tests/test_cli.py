from pathlib import Path

import orjson
from typer.testing import CliRunner

from fedwire.cli import app
from fedwire.codec.fields import FormatOptions
from fedwire.reader import parse_message
from fedwire.sample import sample_message

runner = CliRunner()


def _write_sample(tmp_path: Path, variable: bool = False) -> Path:
    path = tmp_path / "message.txt"
    path.write_text(sample_message().format(FormatOptions(variable_length_fields=variable, newline=True)))
    return path


def test_parse_writes_json(tmp_path: Path) -> None:
    source = _write_sample(tmp_path)
    out = tmp_path / "message.json"
    result = runner.invoke(app, ["parse", str(source), "-o", str(out)])
    assert result.exit_code == 0
    payload = orjson.loads(out.read_bytes())
    assert payload["Adjustment"]["amount"] == "1234.56"
    assert list(payload)[0] == "SenderSupplied"


def test_parse_reports_error_with_partial_message(tmp_path: Path) -> None:
    source = tmp_path / "bad.txt"
    source.write_text("{6400}Line One*\n{8600}01CRDTUSD1234.56Z*\n")
    out = tmp_path / "bad.json"
    result = runner.invoke(app, ["parse", str(source), "-o", str(out)])
    assert result.exit_code == 1
    payload = orjson.loads(out.read_bytes())
    assert payload["error"]["kind"] == "NON_AMOUNT"
    assert payload["error"]["line"] == 2
    assert "FIBeneficiary" in payload["partial"]


def test_validate_lists_errors(tmp_path: Path) -> None:
    source = tmp_path / "bad.txt"
    source.write_text("{8600}ZZCRDTXZP1234.56*\n")
    result = runner.invoke(app, ["validate", str(source), "--no-mandatory"])
    assert result.exit_code == 1
    assert "2 validation errors" in result.stdout


def test_validate_sample_is_clean(tmp_path: Path) -> None:
    result = runner.invoke(app, ["validate", str(_write_sample(tmp_path))])
    assert result.exit_code == 0
    assert "Valid" in result.stdout


def test_format_switches_mode(tmp_path: Path) -> None:
    source = _write_sample(tmp_path)
    out = tmp_path / "variable.txt"
    result = runner.invoke(app, ["format", str(source), "--variable", "-o", str(out)])
    assert result.exit_code == 0
    text = out.read_text()
    assert "{8600}01CRDTUSD1234.56* Adjustment Additional Information*" in text
    assert parse_message(text) == sample_message()


def test_format_honours_config(tmp_path: Path) -> None:
    source = _write_sample(tmp_path)
    config = tmp_path / "codec.yaml"
    config.write_text("variable_length_fields: true\n")
    result = runner.invoke(app, ["format", str(source), "--config", str(config)])
    assert result.exit_code == 0
    assert "{6400}Line One*Line Two*" in result.stdout


def test_sample_command(tmp_path: Path) -> None:
    out = tmp_path / "sample.txt"
    result = runner.invoke(app, ["sample", "-o", str(out)])
    assert result.exit_code == 0
    assert parse_message(out.read_text()) == sample_message()


def test_missing_input_is_bad_parameter(tmp_path: Path) -> None:
    result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])
    assert result.exit_code != 0
