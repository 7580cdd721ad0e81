"""Command-line interface for magic-json."""

import asyncio
import json
import logging
import sys
import click
from pathlib import Path
from typing import Any, Optional
from . import __version__
from .magic_json import get_descriptor, read_from, write_to


def describe_indent(indent: Optional[str]) -> str:
    """Human readable description of an indentation unit."""
    if not indent:
        return "none"
    if set(indent) == {"\t"}:
        return "1 tab" if len(indent) == 1 else f"{len(indent)} tabs"
    if set(indent) == {" "}:
        return "1 space" if len(indent) == 1 else f"{len(indent)} spaces"
    return repr(indent)


def parse_value(raw: str) -> Any:
    """Parse a command-line value as JSON, falling back to a plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def set_path(document: Any, key: str, value: Any) -> None:
    """
    Assign value at a dotted key path inside document.

    Integer segments index lists; missing intermediate objects are created.

    Raises:
        KeyError: If the path is empty
        IndexError: If a list index is out of range
        TypeError: If the path crosses a primitive value
    """
    segments = key.split(".")
    if not key or not all(segments):
        raise KeyError(f"invalid key path: {key!r}")

    target = document
    for segment in segments[:-1]:
        if isinstance(target, list):
            target = target[int(segment)]
        elif isinstance(target, dict):
            target = target.setdefault(segment, {})
        else:
            raise TypeError(f"cannot descend into {type(target).__name__} at {segment!r}")

    last = segments[-1]
    if isinstance(target, list):
        index = int(last)
        if index == len(target):
            target.append(value)
        else:
            target[index] = value
    elif isinstance(target, dict):
        target[last] = value
    else:
        raise TypeError(f"cannot assign into {type(target).__name__} at {last!r}")


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose: bool):
    """magic-json - Edit JSON files without changing their formatting."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(input_file: Path):
    """Show the formatting detected in a JSON file."""
    try:
        document = asyncio.run(read_from(input_file))
    except (OSError, ValueError) as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)

    descriptor = get_descriptor(document)
    if descriptor is None:
        click.echo(f"📄 {input_file.absolute()}: not an object or array, no formatting recorded")
        return

    click.echo(f"📄 {descriptor.source_path}")
    click.echo(f"   Indentation: {describe_indent(descriptor.indent)}")
    click.echo(f"   Line endings: {'CRLF' if descriptor.use_crlf else 'LF'}")
    click.echo(f"   Final newline: {'yes' if descriptor.has_final_newline else 'no'}")


@main.command(name='set')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('key')
@click.argument('value')
def set_value(input_file: Path, key: str, value: str):
    """Set KEY (dotted path) to VALUE (JSON or plain string) in a JSON file."""
    try:
        document = asyncio.run(read_from(input_file))
        set_path(document, key, parse_value(value))
        asyncio.run(write_to(document))
    except (OSError, ValueError, KeyError, IndexError, TypeError) as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)

    click.echo(f"✅ Set {key} in {input_file}")


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--indent', '-i', type=click.IntRange(min=0), help='Number of spaces per level')
@click.option('--tabs', '-t', is_flag=True, help='Indent with tabs')
def reindent(input_file: Path, indent: Optional[int], tabs: bool):
    """Rewrite a JSON file with new indentation, keeping its line endings."""
    if tabs == (indent is not None):
        raise click.UsageError("Give exactly one of --indent or --tabs")
    unit = "\t" if tabs else " " * indent

    try:
        document = asyncio.run(read_from(input_file))
        asyncio.run(write_to(document, input_file, indent=unit))
    except (OSError, ValueError) as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)

    click.echo(f"✅ Reindented {input_file} with {describe_indent(unit)}")


if __name__ == '__main__':
    main()
