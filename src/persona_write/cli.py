"""Persona Writer - build a record and persist its encoding."""
from __future__ import annotations

from pathlib import Path

import click

from persona_core.protocol import DEFAULT_RECORD_FILE
from persona_core.record import Record
from persona_core.storage import append_record, save_record


def write_record(name: str, age: int, out_path: Path, append: bool = False) -> int:
    """Persist Record(name, age) to ``out_path``; returns bytes written."""
    record = Record(name, age)
    if append:
        offset = append_record(out_path, record)
        click.echo(f"Record appended to {out_path} at offset {offset} ({record.encoded_size()} bytes)")
    else:
        save_record(out_path, record)
        click.echo(f"Record saved to {out_path} ({record.encoded_size()} bytes)")
    return record.encoded_size()


# Negative ages ("-3") are positional values, not options.
@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("name", default="Juan")
@click.argument("age", type=int, default=30)
@click.option(
    "--out",
    "out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_RECORD_FILE,
    show_default=True,
    help="Record file to write",
)
@click.option("--append", is_flag=True, help="Append to a record stream instead of replacing the file")
def main(name: str, age: int, out: Path, append: bool) -> None:
    """Encode a (NAME, AGE) record and write it to a file."""
    try:
        write_record(name, age, out, append=append)
    except Exception as e:
        # Fail closed with a single-line reason, no stack trace.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
