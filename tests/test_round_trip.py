"""Export a request tree, import the result, and compare the requests."""

from pathlib import Path

from httpconv.file_io.collection_importer import CollectionImporter
from httpconv.file_io.directory_exporter import DirectoryExporter
from httpconv.file_io.request_parser import RequestFileParser


FILES = {
    "users/get_user.http": (
        "# Get User\n"
        "GET https://api.example.com/users/1\n"
        "Accept: application/json\n"
        "###\n"
        "# Update User\n"
        "PUT https://api.example.com/users/1\n"
        "Content-Type: application/json\n"
        "\n"
        "{\n"
        '  "name": "Ada",\n'
        "\n"
        '  "role": "admin"\n'
        "}\n"
    ),
    "health.http": "# Ping\nGET https://api.example.com/ping\n\nplain body\n",
}


def _signature(records):
    return [(r.name, r.method, r.url, [(h.key, h.value) for h in r.headers], r.body) for r in records]


def test_export_then_import_keeps_requests(tmp_path: Path, write_file):
    source = tmp_path / "source"
    for relative, content in FILES.items():
        write_file(source, relative, content)

    collection = DirectoryExporter().build_collection(source, "Round Trip")
    importer = CollectionImporter()
    target = importer.write_tree(importer.read_collection(collection.to_dict()), tmp_path / "http-requests")

    parser = RequestFileParser()
    original = []
    for relative in sorted(FILES):
        original.extend(parser.parse_file(source / relative))

    regenerated = []
    for path in sorted(target.rglob("*.http")):
        regenerated.extend(parser.parse_file(path))

    assert sorted(_signature(regenerated), key=lambda s: s[0]) == sorted(_signature(original), key=lambda s: s[0])
    assert (target / "users" / "get_user" / "update_user.http").exists()
    assert (target / "health" / "ping.http").exists()
    assert not parser.report.has_skips
