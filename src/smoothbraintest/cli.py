from __future__ import annotations

import json
from pathlib import Path

import typer

app = typer.Typer(name="smoothbrain", help="Inspect smoothbrain assertion settings")


@app.command("check-config")
def check_config(
    config: str = typer.Argument(help="Path to settings YAML file"),
):
    """Validate a settings file and print the effective settings."""
    import yaml

    from smoothbraintest.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        engine_config = load_config(config_path)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(json.dumps(engine_config.model_dump(), indent=2))


@app.command()
def schema(
    out: str | None = typer.Option(
        None, help="Output path for JSON Schema (defaults to stdout)"
    ),
):
    """Generate JSON Schema for the settings YAML format."""
    from smoothbraintest.schema import generate_json_schema, write_json_schema

    if out is None:
        typer.echo(json.dumps(generate_json_schema(), indent=2))
        return

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
