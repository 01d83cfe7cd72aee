"""Usage: load the ordered rule set from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from doc_namer.core.exceptions import ConfigLoadError
from doc_namer.schemas.rules import Rule, RuleConfig


def load_rules(path: Path | str) -> tuple[Rule, ...]:
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"rules file {source}: cannot read: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"rules file {source}: invalid JSON: {exc}") from exc

    return parse_rules(data, source=source)


def parse_rules(data: object, *, source: Path | str = "<memory>") -> tuple[Rule, ...]:
    if not isinstance(data, dict):
        raise ConfigLoadError(f"rules file {source}: top level must be an object with a 'rules' list")
    try:
        config = RuleConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigLoadError(f"rules file {source}: {_describe(exc)}") from exc
    return config.rules


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = _format_location(error.get("loc", ()))
        problems.append(f"{location}: {error.get('msg')}")
    return "; ".join(problems)


def _format_location(loc: tuple[int | str, ...]) -> str:
    # ("rules", 2, "dateExtractionRegex") -> "rules[2].dateExtractionRegex"
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int) and parts:
            parts[-1] = f"{parts[-1]}[{part}]"
        else:
            parts.append(str(part))
    return ".".join(parts) or "<root>"
