from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Callable

import typer

from .arrays import array_move_immutable
from .config import policy_from_env
from .debug import debug_log
from .errors import InvalidArgumentKind
from .merge import UNDEFINED, MergePolicy, Merger
from .numerics import file_size, shorten_large_number, video_duration
from .projections import omit, pick
from .strings import is_hex_color
from .validators import (
    is_strong_password,
    is_valid_date,
    is_valid_email,
    is_valid_phone_number,
    is_valid_url,
    is_valid_user_name,
)

app = typer.Typer(help="utilkit CLI")
format_app = typer.Typer(help="Number formatting")
validate_app = typer.Typer(help="Value validation")
app.add_typer(format_app, name="format")
app.add_typer(validate_app, name="validate")

CLI_ERRORS = (FileNotFoundError, ValueError, InvalidArgumentKind)


def to_jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items() if item is not UNDEFINED}
    if isinstance(value, (list, tuple)):
        return [None if item is UNDEFINED else to_jsonable(item) for item in value]
    return value


def dump_json(payload: Any, indent: int = 2) -> str:
    return json.dumps(to_jsonable(payload), indent=indent, sort_keys=True)


def read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Missing input at {path}")
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def fail(exc: Exception) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED)
    return typer.Exit(code=1)


def resolve_policy(
    merge_arrays: bool | None,
    unique: bool | None,
    allow_undefined: bool | None,
) -> MergePolicy:
    policy = policy_from_env()
    overrides = {
        "merge_arrays": merge_arrays,
        "unique_array_items": unique,
        "allow_undefined_overrides": allow_undefined,
    }
    return dataclasses.replace(
        policy, **{name: value for name, value in overrides.items() if value is not None}
    )


@app.command("merge")
def merge_files(
    files: list[Path] = typer.Argument(..., help="JSON object files, applied left to right"),
    merge_arrays: bool | None = typer.Option(
        None, "--merge-arrays/--replace-arrays", help="Concatenate or replace list values"
    ),
    unique: bool | None = typer.Option(
        None, "--unique/--allow-duplicates", help="Deduplicate concatenated lists"
    ),
    allow_undefined: bool | None = typer.Option(
        None,
        "--null-overrides/--keep-on-null",
        help="Let null source values remove existing keys, or keep the existing value",
    ),
    indent: int = typer.Option(2, "--json-indent", help="Indentation of the JSON output"),
) -> None:
    """Deep merge JSON object files and print the result."""
    try:
        policy = resolve_policy(merge_arrays, unique, allow_undefined)
        debug_log(f"[utilkit.cli] merge policy={policy} files={[str(f) for f in files]}")
        # JSON has no undefined, so null in a source file stands in for it
        documents = [nulls_to_undefined(read_json(path)) for path in files]
        result = Merger(policy).merge({}, *documents)
    except CLI_ERRORS as exc:
        raise fail(exc) from exc

    typer.echo(dump_json(result, indent))


def nulls_to_undefined(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: UNDEFINED if item is None else nulls_to_undefined(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        # null as a list item is a value, not an override
        return [item if item is None else nulls_to_undefined(item) for item in value]
    return value


def _project(path: Path, keys: list[str], projection: Callable[[dict, list[str]], dict]) -> None:
    try:
        document = read_json(path)
        result = projection(document, keys)
    except CLI_ERRORS as exc:
        raise fail(exc) from exc
    typer.echo(dump_json(result))


@app.command("pick")
def pick_keys(
    file: Path = typer.Argument(..., help="JSON object file"),
    keys: list[str] = typer.Argument(..., help="Keys to keep"),
) -> None:
    """Print only the given keys of a JSON object."""
    _project(file, keys, pick)


@app.command("omit")
def omit_keys(
    file: Path = typer.Argument(..., help="JSON object file"),
    keys: list[str] = typer.Argument(..., help="Keys to drop"),
) -> None:
    """Print a JSON object without the given keys."""
    _project(file, keys, omit)


@app.command("move")
def move_item(
    file: Path = typer.Argument(..., help="JSON array file"),
    from_index: int = typer.Argument(..., help="Index of the item to move"),
    to_index: int = typer.Argument(..., help="Destination index"),
) -> None:
    """Move one item of a JSON array and print the new array."""
    try:
        items = read_json(file)
        result = array_move_immutable(items, from_index, to_index)
    except CLI_ERRORS as exc:
        raise fail(exc) from exc
    typer.echo(dump_json(result))


@format_app.command("size")
def format_size(value: float = typer.Argument(..., help="Size in bytes")) -> None:
    """Format a byte count as bytes, KB or MB."""
    typer.echo(file_size(value))


@format_app.command("duration")
def format_duration(value: str = typer.Argument(..., help="Duration in seconds")) -> None:
    """Format seconds as [HH:]MM:SS."""
    try:
        typer.echo(video_duration(value))
    except CLI_ERRORS as exc:
        raise fail(exc) from exc


@format_app.command("shorten")
def format_shorten(value: float = typer.Argument(..., help="Number to shorten")) -> None:
    """Shorten a large number with a K, M or G suffix."""
    result = shorten_large_number(value)
    if isinstance(result, float) and result.is_integer():
        result = int(result)
    typer.echo(str(result))


def report_validity(valid: bool) -> None:
    if valid:
        typer.secho("valid", fg=typer.colors.GREEN)
        return
    typer.secho("invalid", fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _validate(check: Callable[[str], bool], value: str) -> None:
    try:
        valid = check(value)
    except CLI_ERRORS as exc:
        raise fail(exc) from exc
    report_validity(valid)


@validate_app.command("email")
def validate_email(value: str = typer.Argument(...)) -> None:
    _validate(is_valid_email, value)


@validate_app.command("url")
def validate_url(value: str = typer.Argument(...)) -> None:
    _validate(is_valid_url, value)


@validate_app.command("username")
def validate_username(value: str = typer.Argument(...)) -> None:
    _validate(is_valid_user_name, value)


@validate_app.command("hex")
def validate_hex(value: str = typer.Argument(...)) -> None:
    _validate(is_hex_color, value)


@validate_app.command("date")
def validate_date(value: str = typer.Argument(..., help="Date as YYYY-MM-DD")) -> None:
    _validate(is_valid_date, value)


@validate_app.command("phone")
def validate_phone(
    value: str = typer.Argument(...),
    locale: str = typer.Option("en-US", "--locale", help="Phone number locale, e.g. en-GB"),
) -> None:
    _validate(lambda number: is_valid_phone_number(number, locale), value)


@app.command("password")
def password_strength(
    password: str = typer.Argument(...),
    min_chars: int = typer.Option(2, "--min-chars"),
    min_symbols: int = typer.Option(2, "--min-symbols"),
    min_numbers: int = typer.Option(2, "--min-numbers"),
) -> None:
    """Print which password strength rules are met."""
    strength = is_strong_password(password, min_chars, min_symbols, min_numbers)
    payload = dataclasses.asdict(strength)
    payload["is_strong"] = strength.is_strong
    typer.echo(dump_json(payload))
    if not strength.is_strong:
        raise typer.Exit(code=1)


def main():
    app()

if __name__ == "__main__":
    main()
