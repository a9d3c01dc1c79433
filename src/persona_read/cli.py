import json
from pathlib import Path

import click

from persona_core.errors import DecodeError
from persona_core.protocol import DEFAULT_RECORD_FILE
from persona_core.storage import load_record, scan_records
from .logic import inspect_file

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def _fatal(msg: str) -> None:
    click.echo(f"FATAL: {msg}")
    raise SystemExit(1)


@click.group()
def main():
    pass


@main.command("show")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path), default=DEFAULT_RECORD_FILE)
@click.option("--all", "all_", is_flag=True, help="Read every record of an appended record stream")
def show_cmd(path: Path, all_: bool):
    try:
        records = scan_records(path) if all_ else [load_record(path)]
    except DecodeError as e:
        _fatal(f"{e.code}: {e.message}")
    except OSError as e:
        _fatal(f"E_IO: {e}")
    for r in records:
        click.echo(f"Name: {r.name}, Age: {r.age}")


@main.command("inspect")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def inspect_cmd(path: Path):
    result = inspect_file(path)
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if result["status"] != "PASS":
        raise SystemExit(1)


if __name__ == "__main__":
    main()
