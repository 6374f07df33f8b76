"""Tests for exporting a directory of request files."""

import json
from pathlib import Path

import pytest

from httpconv.core.errors import CollectionFormatError, ConversionError
from httpconv.file_io.directory_exporter import DirectoryExporter, ExportConfig
from httpconv.file_io.env_loader import find_env_file, load_env_variables
from httpconv.utils.constants import POSTMAN_SCHEMA_URL


GET_USER = "# Get User\nGET https://api.example.com/users/1\nAccept: application/json\n"


def test_export_example_tree(tmp_path: Path, write_file):
    root = tmp_path / "requests"
    write_file(root, "users/get_user.http", GET_USER)

    collection = DirectoryExporter().build_collection(root, "My API")
    data = collection.to_dict()

    assert data["info"]["name"] == "My API"
    assert data["info"]["schema"] == POSTMAN_SCHEMA_URL
    assert data["info"]["description"] == "Generated from HTTP files"
    assert data["info"]["_postman_id"]
    assert data["variable"] == []

    users = data["item"][0]
    assert users["name"] == "Users"
    group = users["item"][0]
    assert group["name"] == "Get User"
    leaf = group["item"][0]
    assert leaf == {
        "name": "Get User",
        "request": {
            "method": "GET",
            "url": "https://api.example.com/users/1",
            "header": [{"key": "Accept", "value": "application/json"}],
        },
    }


def test_body_is_exported_as_raw(tmp_path: Path, write_file):
    write_file(tmp_path, "create.http", "# Create\nPOST https://x\nContent-Type: text/plain\n\nhello\n\nworld\n")
    data = DirectoryExporter().build_collection(tmp_path, "c").to_dict()
    request = data["item"][0]["item"][0]["request"]
    assert request["body"] == {"mode": "raw", "raw": "hello\n\nworld"}


def test_walk_is_lexical_and_ignores_other_files(tmp_path: Path, write_file):
    write_file(tmp_path, "b.http", "# B\nGET https://b\n")
    write_file(tmp_path, "a/inner.http", "# Inner\nGET https://a\n")
    write_file(tmp_path, "c.rest", "# C\nGET https://c\n")
    write_file(tmp_path, "notes.txt", "# Not\nGET https://n\n")
    write_file(tmp_path, "empty_dir/readme.md", "nothing here")

    exporter = DirectoryExporter()
    files = [p.relative_to(tmp_path).as_posix() for p in exporter.iter_request_files(tmp_path)]
    assert files == ["a/inner.http", "b.http", "c.rest"]

    collection = exporter.build_collection(tmp_path, "c")
    assert [n.name for n in collection.items] == ["A", "B", "C"]


def test_request_extensions_are_configurable(tmp_path: Path, write_file):
    write_file(tmp_path, "a.http", "# A\nGET https://a\n")
    write_file(tmp_path, "b.rest", "# B\nGET https://b\n")
    exporter = DirectoryExporter(ExportConfig(request_extensions=[".http"]))
    assert [n.name for n in exporter.build_collection(tmp_path, "c").items] == ["A"]


def test_undecodable_file_is_skipped(tmp_path: Path, write_file):
    (tmp_path / "bad.http").write_bytes(b"# Bad\nGET https://x\n\n\xff")
    write_file(tmp_path, "good.http", "# Good\nGET https://x\n")

    exporter = DirectoryExporter()
    collection = exporter.build_collection(tmp_path, "c")

    assert [n.name for n in collection.items] == ["Good"]
    assert exporter.report.files_processed == 2
    assert exporter.report.requests_converted == 1
    assert exporter.report.skipped[0].kind == "file"
    assert exporter.report.exit_code == 2


def test_invalid_blocks_are_reported(tmp_path: Path, write_file):
    write_file(tmp_path, "mixed.http", "# Good\nGET https://x\n###\njust one line\n")
    exporter = DirectoryExporter()
    collection = exporter.build_collection(tmp_path, "c")
    assert [r.name for r in collection.items[0].iter_requests()] == ["Good"]
    assert len(exporter.report.skipped) == 1


def test_missing_root_is_fatal(tmp_path: Path):
    with pytest.raises(ConversionError):
        DirectoryExporter().build_collection(tmp_path / "missing", "c")


def test_export_writes_json_file(tmp_path: Path, write_file):
    root = tmp_path / "src"
    write_file(root, "ping.http", "# Ping\nGET https://x/ping\n")
    out_dir = tmp_path / "out"

    exporter = DirectoryExporter(ExportConfig(output_file="collection.json"))
    output_path = exporter.export(root, "Pings", out_dir)

    assert output_path == out_dir / "collection.json"
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["item"][0]["item"][0]["name"] == "Ping"
    assert exporter.report.files_written == 1


def test_env_file_found_in_ancestor(tmp_path: Path, write_file):
    nested = tmp_path / "a" / "b" / "c"
    nested.mkdir(parents=True)
    env_file = write_file(tmp_path, "a/http-client.env.json", "{}")
    assert find_env_file(nested) == env_file.resolve()


def test_env_file_nearest_wins(tmp_path: Path, write_file):
    write_file(tmp_path, "a/http-client.env.json", "{}")
    nearer = write_file(tmp_path, "a/b/http-client.env.json", "{}")
    assert find_env_file(tmp_path / "a" / "b") == nearer.resolve()


def test_env_variables_are_flattened(tmp_path: Path, write_file):
    env_file = write_file(
        tmp_path,
        "http-client.env.json",
        json.dumps({"dev": {"host": "localhost", "port": 8080}, "prod": {"host": "example.com"}, "broken": "x"}),
    )
    variables = load_env_variables(env_file)
    assert [(v.key, v.value, v.type) for v in variables] == [
        ("host", "localhost", "string"),
        ("port", "8080", "string"),
        ("host", "example.com", "string"),
    ]


def test_invalid_env_file_is_fatal(tmp_path: Path, write_file):
    env_file = write_file(tmp_path, "http-client.env.json", "{not json")
    with pytest.raises(CollectionFormatError):
        load_env_variables(env_file)


def test_export_picks_up_env_variables(tmp_path: Path, write_file):
    write_file(tmp_path, "http-client.env.json", json.dumps({"dev": {"token": "abc"}}))
    root = tmp_path / "api" / "v1"
    write_file(root, "ping.http", "# Ping\nGET {{host}}/ping\n")

    data = DirectoryExporter().build_collection(root, "c").to_dict()
    assert data["variable"] == [{"key": "token", "value": "abc", "type": "string"}]


def test_directory_symlinks_are_not_followed(tmp_path: Path, write_file):
    root = tmp_path / "r"
    write_file(root, "api/ping.http", "# Ping\nGET https://x/ping\n")
    try:
        (root / "api" / "loop").symlink_to(root, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported here")

    files = list(DirectoryExporter().iter_request_files(root))

    assert files == [root / "api" / "ping.http"]


def test_unlistable_directory_aborts_export(tmp_path: Path, write_file, monkeypatch):
    root = tmp_path / "requests"
    write_file(root, "ping.http", "# Ping\nGET https://x/ping\n")

    def deny(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(type(root), "iterdir", deny)

    with pytest.raises(ConversionError, match="Could not read directory"):
        DirectoryExporter().build_collection(root, "c")
