from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from fedwire.codec.fields import FormatOptions


@dataclass
class CodecConfig:
    variable_length_fields: bool = False
    validate_on_read: bool = True
    require_mandatory_tags: bool = False
    newline: bool = True

    @staticmethod
    def from_mapping(payload: dict[str, Any]) -> CodecConfig:
        return CodecConfig(
            variable_length_fields=bool(payload.get("variable_length_fields", False)),
            validate_on_read=bool(payload.get("validate_on_read", True)),
            require_mandatory_tags=bool(payload.get("require_mandatory_tags", False)),
            newline=bool(payload.get("newline", True)),
        )

    def format_options(self) -> FormatOptions:
        return FormatOptions(
            variable_length_fields=self.variable_length_fields, newline=self.newline
        )


def load_config(path: Path) -> CodecConfig:
    if path.suffix.lower() in {".yml", ".yaml"}:
        payload = yaml.safe_load(path.read_text())
    else:
        payload = json.loads(path.read_text())
    return CodecConfig.from_mapping(payload or {})


def sample_config() -> dict[str, Any]:
    return asdict(CodecConfig())
