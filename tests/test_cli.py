import json

import pytest
from typer.testing import CliRunner

from utilkit.cli import app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in [
        "UTILKIT_DEBUG",
        "UTILKIT_MERGE_ARRAYS",
        "UTILKIT_UNIQUE_ARRAY_ITEMS",
        "UTILKIT_ALLOW_UNDEFINED_OVERRIDES",
    ]:
        monkeypatch.delenv(name, raising=False)


def write_json(path, payload):
    path.write_text(json.dumps(payload))
    return str(path)


def test_merge_command_merges_files(tmp_path):
    base = write_json(tmp_path / "base.json", {"title": "Base", "tags": [1, 2], "meta": {"a": 1}})
    override = write_json(tmp_path / "override.json", {"title": "New", "tags": [2, 3], "meta": {"b": 2}})

    runner = CliRunner()
    result = runner.invoke(app, ["merge", base, override])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "title": "New",
        "tags": [1, 2, 3],
        "meta": {"a": 1, "b": 2},
    }


@pytest.mark.parametrize(
    "flags, expected",
    [
        (["--replace-arrays"], [2, 3]),
        (["--allow-duplicates"], [1, 2, 2, 3]),
    ],
)
def test_merge_command_array_flags(tmp_path, flags, expected):
    base = write_json(tmp_path / "a.json", {"tags": [1, 2]})
    override = write_json(tmp_path / "b.json", {"tags": [2, 3]})

    result = CliRunner().invoke(app, ["merge", base, override, *flags])

    assert result.exit_code == 0
    assert json.loads(result.output)["tags"] == expected


def test_merge_command_reads_policy_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("UTILKIT_MERGE_ARRAYS", "false")
    base = write_json(tmp_path / "a.json", {"tags": [1, 2]})
    override = write_json(tmp_path / "b.json", {"tags": [3]})

    result = CliRunner().invoke(app, ["merge", base, override])

    assert json.loads(result.output)["tags"] == [3]


def test_merge_command_null_handling(tmp_path):
    base = write_json(tmp_path / "a.json", {"a": 1, "b": 2})
    override = write_json(tmp_path / "b.json", {"a": None})
    runner = CliRunner()

    dropped = runner.invoke(app, ["merge", base, override])
    kept = runner.invoke(app, ["merge", base, override, "--keep-on-null"])

    assert json.loads(dropped.output) == {"b": 2}
    assert json.loads(kept.output) == {"a": 1, "b": 2}


def test_merge_command_rejects_arrays(tmp_path):
    base = write_json(tmp_path / "a.json", {"a": 1})
    bad = write_json(tmp_path / "b.json", [1, 2])

    result = CliRunner().invoke(app, ["merge", base, bad])

    assert result.exit_code == 1
    assert "not arrays" in result.output


def test_merge_command_missing_file(tmp_path):
    result = CliRunner().invoke(app, ["merge", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Missing input" in result.output


def test_pick_and_omit_commands(tmp_path):
    source = write_json(tmp_path / "obj.json", {"a": 1, "b": "2", "c": 3})
    runner = CliRunner()

    picked = runner.invoke(app, ["pick", source, "a", "c"])
    omitted = runner.invoke(app, ["omit", source, "a", "c"])

    assert json.loads(picked.output) == {"a": 1, "c": 3}
    assert json.loads(omitted.output) == {"b": "2"}


def test_move_command(tmp_path):
    source = write_json(tmp_path / "list.json", ["a", "b", "c"])

    result = CliRunner().invoke(app, ["move", source, "1", "2"])

    assert result.exit_code == 0
    assert json.loads(result.output) == ["a", "c", "b"]


@pytest.mark.parametrize(
    "args, expected",
    [
        (["format", "size", "2048"], "2.0KB"),
        (["format", "size", "500"], "500bytes"),
        (["format", "duration", "3661"], "01:01:01"),
        (["format", "shorten", "1500"], "1.5K"),
        (["format", "shorten", "999"], "999"),
    ],
)
def test_format_commands(args, expected):
    result = CliRunner().invoke(app, args)

    assert result.exit_code == 0
    assert result.output.strip() == expected


@pytest.mark.parametrize(
    "args, exit_code",
    [
        (["validate", "email", "user@example.com"], 0),
        (["validate", "email", "not-an-email"], 1),
        (["validate", "url", "https://example.com"], 0),
        (["validate", "username", "admin"], 1),
        (["validate", "hex", "#fff"], 0),
        (["validate", "date", "2023-02-30"], 1),
        (["validate", "phone", "07911123456", "--locale", "en-GB"], 0),
    ],
)
def test_validate_commands(args, exit_code):
    result = CliRunner().invoke(app, args)

    assert result.exit_code == exit_code
    assert result.output.strip() == ("valid" if exit_code == 0 else "invalid")


def test_password_command():
    runner = CliRunner()

    strong = runner.invoke(app, ["password", "Ab12!@cd"])
    weak = runner.invoke(app, ["password", "password"])

    assert strong.exit_code == 0
    assert json.loads(strong.output)["is_strong"] is True
    assert weak.exit_code == 1
    assert json.loads(weak.output)["has_number"] is False


def test_merge_command_keeps_null_list_items(tmp_path):
    base = write_json(tmp_path / "a.json", {"items": [{"id": 1, "note": "x"}]})
    override = write_json(tmp_path / "b.json", {"items": [None, {"id": 2, "note": None}]})

    result = CliRunner().invoke(app, ["merge", base, override])

    assert result.exit_code == 0
    assert json.loads(result.output)["items"] == [{"id": 1, "note": "x"}, None, {"id": 2}]
