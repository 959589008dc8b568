"""Tests for catalogue and manifest CLI commands."""

import json
from unittest.mock import patch

from click.testing import CliRunner

from asm_packages.cli.main import cli


def _invoke(project, *args):
    runner = CliRunner()
    return runner.invoke(cli, ["--project", str(project), *args])


def _deps(project):
    return json.loads((project / "Packages" / "manifest.json").read_text())["dependencies"]


class TestList:
    def test_lists_sections(self, unity_project):
        result = _invoke(unity_project, "list")
        assert result.exit_code == 0
        assert "Dependencies" in result.output
        assert "Samples" in result.output
        assert "Editor Coroutines" in result.output

    def test_list_stamps_version(self, unity_project, version_resource):
        result = _invoke(unity_project, "list")
        assert result.exit_code == 0
        package_json = unity_project / "Packages" / "plugin.asm.package-manager" / "package.json"
        assert '"version": "1.4.0"' in package_json.read_text()

    def test_missing_manifest_fails(self, tmp_path):
        result = _invoke(tmp_path, "list")
        assert result.exit_code == 1
        assert "Manifest not found" in result.output


class TestInstallRemove:
    def test_install_plugin(self, unity_project, version_resource):
        result = _invoke(unity_project, "install", "plugin.asm.locking")
        assert result.exit_code == 0
        assert "Added" in result.output
        assert _deps(unity_project)["plugin.asm.locking"].endswith(".git#asm-1.4.0")

    def test_install_twice(self, unity_project):
        _invoke(unity_project, "install", "com.unity.editorcoroutines")
        result = _invoke(unity_project, "install", "com.unity.editorcoroutines")
        assert result.exit_code == 0
        assert "already in" in result.output

    def test_remove(self, unity_project):
        _invoke(unity_project, "install", "plugin.asm.addressables")
        result = _invoke(unity_project, "remove", "plugin.asm.addressables")
        assert result.exit_code == 0
        assert "Removed" in result.output
        assert "plugin.asm.addressables" not in _deps(unity_project)

    def test_remove_absent(self, unity_project):
        result = _invoke(unity_project, "remove", "plugin.asm.addressables")
        assert result.exit_code == 0
        assert "not in" in result.output

    def test_install_example_rejected(self, unity_project):
        result = _invoke(unity_project, "install", "example.asm.streaming")
        assert result.exit_code == 1
        assert "sample" in result.output

    def test_unknown_package(self, unity_project):
        result = _invoke(unity_project, "install", "nope")
        assert result.exit_code == 1
        assert "Unknown package" in result.output


class TestActivateAndLinks:
    def test_activate_plugin_toggles(self, unity_project):
        assert "Added" in _invoke(unity_project, "activate", "plugin.asm.locking").output
        assert "Removed" in _invoke(unity_project, "activate", "plugin.asm.locking").output

    def test_activate_example_opens_browser(self, unity_project):
        with patch("webbrowser.open", return_value=True) as mock_open:
            result = _invoke(unity_project, "activate", "example.asm.level-select")
        assert result.exit_code == 0
        mock_open.assert_called_once_with(
            "https://github.com/Lazy-Solutions/example.asm.level-select.git"
        )

    def test_open_dependency_without_link(self, unity_project):
        with patch("webbrowser.open") as mock_open:
            result = _invoke(unity_project, "open", "com.unity.editorcoroutines")
        assert result.exit_code == 1
        mock_open.assert_not_called()

    def test_docs_and_changelog(self, unity_project):
        with patch("webbrowser.open", return_value=True) as mock_open:
            assert _invoke(unity_project, "docs").exit_code == 0
            assert _invoke(unity_project, "changelog").exit_code == 0
        urls = [c.args[0] for c in mock_open.call_args_list]
        assert urls[0].endswith("/wiki")
        assert urls[1].endswith("#releases")


class TestStampVersion:
    def test_explicit_version(self, unity_project):
        result = _invoke(unity_project, "stamp-version", "--version", "1.3.2")
        assert result.exit_code == 0
        assert "Stamped version 1.3.2" in result.output
        result = _invoke(unity_project, "stamp-version", "--version", "1.3.2")
        assert "already 1.3.2" in result.output

    def test_missing_version_file(self, tmp_path):
        result = _invoke(tmp_path, "stamp-version", "--version", "1.3.2")
        assert result.exit_code == 1
        assert "Version file not found" in result.output


class TestSelect:
    def test_ours(self, unity_project):
        result = _invoke(unity_project, "select", "plugin.asm.package-manager")
        assert result.exit_code == 0
        assert "Plugins" in result.output

    def test_not_ours(self, unity_project):
        result = _invoke(unity_project, "select", "com.unity.ugui")
        assert result.exit_code == 0
        assert "panel hidden" in result.output


class TestLoadTimeStamp:
    def _break_version_file(self, project):
        package_json = project / "Packages" / "plugin.asm.package-manager" / "package.json"
        package_json.write_text('{"name": "plugin.asm.package-manager"}')
        return package_json

    def test_install_works_without_version_field(self, unity_project):
        self._break_version_file(unity_project)
        result = _invoke(unity_project, "install", "com.unity.editorcoroutines")
        assert result.exit_code == 0
        assert _deps(unity_project)["com.unity.editorcoroutines"] == "1.0.0"

    def test_list_works_with_invalid_version(self, unity_project):
        package_json = unity_project / "Packages" / "plugin.asm.package-manager" / "package.json"
        package_json.write_text('{"version": "not a version"}')
        result = _invoke(unity_project, "list")
        assert result.exit_code == 0
        assert "Plugins" in result.output

    def test_stamp_version_stays_strict(self, unity_project):
        self._break_version_file(unity_project)
        result = _invoke(unity_project, "stamp-version", "--version", "1.3.2")
        assert result.exit_code == 1
        assert "No version field" in result.output

    def test_stamp_reports_previous_version(self, unity_project):
        result = _invoke(unity_project, "stamp-version", "--version", "1.3.2")
        assert "(was 1.0.0)" in result.output


class TestUnreadableManifest:
    def test_invalid_utf8_manifest_fails_cleanly(self, unity_project):
        (unity_project / "Packages" / "manifest.json").write_bytes(
            b'{"dependencies": {"a": "\xff"}}'
        )
        result = _invoke(unity_project, "install", "plugin.asm.locking")
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "not valid UTF-8" in result.output
