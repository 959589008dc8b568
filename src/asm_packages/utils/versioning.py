"""Version management utilities.

The ASM version shown to users comes from the ``version`` field of the
package-manager package's ``package.json``. It is stamped from the version
resource shipped with ASM whenever the two differ.
"""

import codecs
import logging
import re
from pathlib import Path

from packaging.version import InvalidVersion, Version

from asm_packages.config.models import DEFAULT_FALLBACK_VERSION
from asm_packages.errors import VersionError

logger = logging.getLogger(__name__)

VERSION_FIELD = re.compile(r'"version"\s*:\s*"(?P<version>[^"]*)"')


def validate_version(value: str) -> str:
    """Return ``value`` if it parses as a version.

    Raises:
        VersionError: If it does not.
    """
    try:
        Version(value)
    except InvalidVersion as e:
        raise VersionError(f"Invalid version: {value!r}") from e
    return value


def resolve_version(resource: Path, fallback: str = DEFAULT_FALLBACK_VERSION) -> str:
    """Running ASM version, read from the version resource.

    Falls back to ``fallback`` when the resource is missing or empty. The
    fallback is a literal that drifts from the shipped version, so its use
    is logged as a warning.
    """
    try:
        text = _read_text(resource, "version resource")[0].strip()
    except FileNotFoundError:
        text = ""

    if text:
        return validate_version(text)

    logger.warning(
        f"Version resource {resource} not found; using fallback version {fallback}, "
        "which may not match the installed ASM release"
    )
    return validate_version(fallback)


def _read_text(path: Path, what: str) -> "tuple[str, bool]":
    """Decode a UTF-8 file and report whether it starts with a BOM.

    ``FileNotFoundError`` propagates; other read and decode failures become
    ``VersionError``.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise
    except OSError as e:
        raise VersionError(f"Could not read {what} {path}: {e}") from e
    try:
        return raw.decode("utf-8-sig"), raw.startswith(codecs.BOM_UTF8)
    except UnicodeDecodeError as e:
        raise VersionError(f"{what.capitalize()} is not valid UTF-8: {path}: {e}") from e


def _find_version(path: Path) -> "tuple[str, re.Match[str], bool]":
    try:
        text, has_bom = _read_text(path, "version file")
    except FileNotFoundError:
        raise VersionError(f"Version file not found: {path}") from None

    match = VERSION_FIELD.search(text)
    if match is None:
        raise VersionError(f"No version field in {path}")
    return text, match, has_bom


def read_version(path: Path) -> str:
    """Read the first ``version`` field from a JSON file."""
    return _find_version(path)[1].group("version")


def stamp_version(path: Path, current: str) -> bool:
    """Rewrite the first ``version`` field in ``path`` to ``current``.

    Args:
        path: JSON file holding a ``"version": "x.y.z"`` field.
        current: Version to stamp.

    Returns:
        True if the file was rewritten, False if it already matched.

    Raises:
        VersionError: If the file is missing, unreadable or not UTF-8, has no
            version field, either version does not parse, or the write fails.
    """
    text, match, has_bom = _find_version(path)
    existing = validate_version(match.group("version"))
    validate_version(current)
    if existing == current:
        logger.debug(f"{path} already at version {current}")
        return False

    start, end = match.span("version")
    updated = text[:start] + current + text[end:]
    try:
        path.write_bytes(updated.encode("utf-8-sig" if has_bom else "utf-8"))
    except OSError as e:
        raise VersionError(f"Could not write version file {path}: {e}") from e
    logger.info(f"Stamped version {current} into {path} (was {existing})")
    return True
