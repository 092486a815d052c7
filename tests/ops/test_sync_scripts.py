"""Tests for mkdo.ops.sync_scripts - package.json script aliases."""

from __future__ import annotations

import json

import pytest

from mkdo.core.errors import ConfigError
from mkdo.core.models import Code, Task
from mkdo.ops.sync_scripts import SyncOptions, parse_sync_args, sync_scripts, update_scripts

TASKS = {
    name: Task(name, None, (Code("bash", "true"),))
    for name in ("build", "format:check", "release notes")
}


def write_manifest(path, data) -> None:
    path.write_text(json.dumps(data, indent=2) + "\n")


class TestParseSyncArgs:
    def test_defaults(self):
        assert parse_sync_args([]) == SyncOptions()

    def test_all_options(self):
        options = parse_sync_args(["--package-json-file", "web/package.json", "--mkdo", "npx mkdo", "--check"])
        assert options.package_json_file.as_posix() == "web/package.json"
        assert options.mkdo == "npx mkdo"
        assert options.check is True

    def test_unknown_argument(self):
        with pytest.raises(ConfigError, match="sync-scripts"):
            parse_sync_args(["--force"])


class TestUpdateScripts:
    def test_creates_scripts(self):
        manifest: dict = {"name": "app"}
        assert update_scripts(manifest, TASKS, "mkdo") is True
        assert manifest["scripts"] == {
            "mkdo": "mkdo",
            "build": "mkdo build",
            "format:check": "mkdo format:check",
            "release notes": "mkdo 'release notes'",
        }

    def test_keeps_unrelated_scripts(self):
        manifest = {"scripts": {"start": "node ."}}
        update_scripts(manifest, {"build": TASKS["build"]}, "mkdo")
        assert manifest["scripts"]["start"] == "node ."

    def test_unchanged(self):
        manifest = {"scripts": {"mkdo": "mkdo", "build": "mkdo build"}}
        assert update_scripts(manifest, {"build": TASKS["build"]}, "mkdo") is False


class TestSyncScripts:
    def test_writes_manifest(self, recorder, tmp_path):
        path = tmp_path / "package.json"
        write_manifest(path, {"name": "app", "scripts": {"start": "node ."}})

        assert sync_scripts(TASKS, recorder.context(tmp_path)) == 0

        text = path.read_text()
        assert text.endswith("}\n")
        scripts = json.loads(text)["scripts"]
        assert scripts["start"] == "node ."
        assert scripts["build"] == "mkdo build"
        assert recorder.logs == ["updates package.json"]

    def test_up_to_date_not_rewritten(self, recorder, tmp_path):
        path = tmp_path / "package.json"
        write_manifest(path, {"scripts": {"mkdo": "mkdo", "build": "mkdo build"}})
        before = path.read_text()

        assert sync_scripts({"build": TASKS["build"]}, recorder.context(tmp_path)) == 0
        assert path.read_text() == before
        assert recorder.logs == []

    def test_check_out_of_date(self, recorder, tmp_path):
        path = tmp_path / "package.json"
        write_manifest(path, {"name": "app"})
        before = path.read_text()

        assert sync_scripts(TASKS, recorder.context(tmp_path, ("--check",))) == 1
        assert recorder.errors == ["needs to update package.json"]
        assert path.read_text() == before

    def test_check_up_to_date(self, recorder, tmp_path):
        write_manifest(tmp_path / "package.json", {"scripts": {"mkdo": "mkdo", "build": "mkdo build"}})
        assert sync_scripts({"build": TASKS["build"]}, recorder.context(tmp_path, ("--check",))) == 0
        assert recorder.errors == []

    def test_custom_file_and_command(self, recorder, tmp_path):
        (tmp_path / "web").mkdir()
        path = tmp_path / "web" / "package.json"
        write_manifest(path, {})
        args = ("--package-json-file", "web/package.json", "--mkdo", "npx mkdo")

        assert sync_scripts({"build": TASKS["build"]}, recorder.context(tmp_path, args)) == 0
        assert json.loads(path.read_text())["scripts"] == {"mkdo": "npx mkdo", "build": "npx mkdo build"}

    def test_missing_manifest(self, recorder, tmp_path):
        with pytest.raises(ConfigError, match="cannot load"):
            sync_scripts(TASKS, recorder.context(tmp_path))

    def test_manifest_not_an_object(self, recorder, tmp_path):
        (tmp_path / "package.json").write_text("[]")
        with pytest.raises(ConfigError, match="JSON object"):
            sync_scripts(TASKS, recorder.context(tmp_path))
