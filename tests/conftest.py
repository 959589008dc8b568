"""Shared fixtures: a minimal Unity project layout on disk."""

import json
from pathlib import Path

import pytest

SAMPLE_MANIFEST = {
    "dependencies": {
        "com.unity.collab-proxy": "2.0.5",
        "com.unity.ide.rider": "3.0.24",
        "com.unity.textmeshpro": "3.0.6",
        "com.unity.ugui": "1.0.0",
    },
    "scopedRegistries": [],
}

SAMPLE_PACKAGE_JSON = """{
  "name": "plugin.asm.package-manager",
  "displayName": "Advanced Scene Manager",
  "version": "1.0.0",
  "unity": "2021.3"
}
"""


@pytest.fixture
def manifest_text() -> str:
    return json.dumps(SAMPLE_MANIFEST, indent=2) + "\n"


@pytest.fixture
def unity_project(tmp_path, manifest_text) -> Path:
    """Create a Unity project with a manifest and an ASM package.json."""
    packages = tmp_path / "Packages"
    (packages / "plugin.asm.package-manager").mkdir(parents=True)
    (packages / "manifest.json").write_text(manifest_text)
    (packages / "plugin.asm.package-manager" / "package.json").write_text(SAMPLE_PACKAGE_JSON)
    return tmp_path


@pytest.fixture
def version_resource(unity_project) -> Path:
    """Ship a version resource reporting 1.4.0."""
    path = (
        unity_project
        / "Assets/AdvancedSceneManager/Resources/AdvancedSceneManager/version.txt"
    )
    path.parent.mkdir(parents=True)
    path.write_text("1.4.0\n")
    return path
