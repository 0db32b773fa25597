"""Generate JSON Schema and docs for the be YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from be.config import BeConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return BeConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    props = schema.get("properties", {})

    lines: list[str] = []
    lines.append("# be YAML Schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Keys")
    for name, prop in props.items():
        kinds = [p.get("type", "any") for p in prop.get("anyOf", [prop])]
        default = json.dumps(prop.get("default"))
        lines.append(f"- `{name}`: {' | '.join(kinds)} (default: {default})")
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
