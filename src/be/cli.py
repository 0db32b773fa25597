from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="be", help="Inline test assertions")
schema_app = typer.Typer(name="schema", help="Generate schema tooling for be.yaml")
app.add_typer(schema_app, name="schema")


@app.command()
def check(
    config: str = typer.Argument(help="Path to be YAML config"),
):
    """Validate a config file and print the effective settings."""
    import yaml

    from be.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        be_config = load_config(config_path)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for key, value in be_config.model_dump().items():
        typer.echo(f"{key}: {value}")


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/be.schema.json", help="Output path for JSON Schema"
    ),
    doc: str = typer.Option("docs/schema.md", help="Output path for schema docs"),
):
    """Generate JSON Schema and docs for the be YAML config."""
    from be.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    doc_path = Path(doc)
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
