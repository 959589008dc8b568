"""Unity package manifest editing.

The manifest (``Packages/manifest.json``) is parsed as JSON and edited through
its ``dependencies`` object. Entries other than the one being toggled keep
their order and values.
"""

import codecs
import json
import logging
import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from asm_packages.errors import ManifestError

logger = logging.getLogger(__name__)

DEPENDENCIES_KEY = "dependencies"
MANIFEST_INDENT = 2

_INDENT = re.compile(r"\n([ \t]+)\S")


def parse_manifest(text: str) -> Dict[str, Any]:
    """Parse manifest text into a dict.

    Raises:
        ManifestError: If the text is not a JSON object or ``dependencies``
            is present but not an object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid manifest JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError("Manifest root must be a JSON object")

    deps = data.get(DEPENDENCIES_KEY)
    if deps is not None and not isinstance(deps, dict):
        raise ManifestError(f"Manifest '{DEPENDENCIES_KEY}' must be a JSON object")

    return data


def dump_manifest(data: Dict[str, Any], like: str = "") -> str:
    """Serialize a manifest.

    Indentation, line endings and the trailing newline follow ``like`` (the
    text being replaced). Without it the output is what Unity writes: two
    spaces, LF and a final newline.
    """
    indent: Any = MANIFEST_INDENT
    newline = "\n"
    trailing_newline = True
    if like:
        found = _INDENT.search(like)
        if found:
            indent = found.group(1)
        if "\r\n" in like:
            newline = "\r\n"
        trailing_newline = like.endswith("\n")

    text = json.dumps(data, indent=indent, ensure_ascii=False)
    if trailing_newline:
        text += "\n"
    return text.replace("\n", newline)


def has_dependency(text: str, package_id: str) -> bool:
    """Check whether ``package_id`` is a key of the manifest's dependencies."""
    data = parse_manifest(text)
    return package_id in data.get(DEPENDENCIES_KEY, {})


def add_dependency(text: str, package_id: str, source: str) -> str:
    """Return manifest text with ``package_id`` added.

    Text is returned unchanged when the id is already present, whatever
    its current source.
    """
    data = parse_manifest(text)
    deps = data.setdefault(DEPENDENCIES_KEY, {})
    if package_id in deps:
        return text
    deps[package_id] = source
    return dump_manifest(data, like=text)


def remove_dependency(text: str, package_id: str) -> str:
    """Return manifest text with ``package_id`` removed.

    Text is returned unchanged when the id is absent.
    """
    data = parse_manifest(text)
    deps = data.get(DEPENDENCIES_KEY, {})
    if package_id not in deps:
        return text
    del deps[package_id]
    return dump_manifest(data, like=text)


def log_recompile_request() -> None:
    """Default change hook.

    Unity re-resolves packages and recompiles when it notices the manifest
    changed, so there is nothing to trigger from outside the editor.
    """
    logger.info("Manifest changed; Unity will resolve packages and recompile on next refresh")


class ManifestEditor:
    """Toggle catalogue entries in a Unity project's package manifest."""

    def __init__(
        self,
        path: Path,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.path = Path(path)
        self.on_change = on_change or log_recompile_request

    def _read(self) -> "tuple[str, bool]":
        """Manifest text and whether the file starts with a UTF-8 BOM."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            raise ManifestError(f"Manifest not found: {self.path}") from None
        except OSError as e:
            raise ManifestError(f"Could not read manifest {self.path}: {e}") from e

        try:
            return raw.decode("utf-8-sig"), raw.startswith(codecs.BOM_UTF8)
        except UnicodeDecodeError as e:
            raise ManifestError(f"Manifest is not valid UTF-8: {self.path}: {e}") from e

    def read_text(self) -> str:
        return self._read()[0]

    def dependencies(self) -> Dict[str, Any]:
        """Current dependency entries, in file order."""
        return dict(parse_manifest(self.read_text()).get(DEPENDENCIES_KEY, {}))

    def is_installed(self, package_id: str) -> bool:
        return has_dependency(self.read_text(), package_id)

    def set_dependency(self, package_id: str, source: str, enabled: bool = True) -> bool:
        """Add or remove a dependency entry.

        Args:
            package_id: Manifest key, e.g. "plugin.asm.locking".
            source: Version or URL written as the entry's value when adding.
            enabled: True to add, False to remove.

        Returns:
            True if the manifest was rewritten.
        """
        original, bom = self._read()
        if enabled:
            updated = add_dependency(original, package_id, source)
        else:
            updated = remove_dependency(original, package_id)

        if updated == original:
            state = "present" if enabled else "absent"
            logger.debug(f"{package_id} already {state} in {self.path}, nothing to do")
            return False

        try:
            self.path.write_bytes(updated.encode("utf-8-sig" if bom else "utf-8"))
        except OSError as e:
            raise ManifestError(f"Could not write manifest {self.path}: {e}") from e

        action = "Added" if enabled else "Removed"
        logger.info(f"{action} {package_id} in {self.path}")
        self.on_change()
        return True

    def toggle(self, package_id: str, source: str) -> bool:
        """Flip an entry's presence. Returns the new installed state."""
        enabled = not self.is_installed(package_id)
        self.set_dependency(package_id, source, enabled=enabled)
        return enabled
