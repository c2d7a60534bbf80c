"""
Version Catalog - Serialize the published version and its build code

Catalog layout (TOML compatible):

    [versions]
    versionName = "2024.05.1"
    versionCode = "1"
"""
import re
from typing import NamedTuple

from gitcalver.core.calendar_version import CalendarVersion
from gitcalver.core.errors import CatalogFormatError

SECTION = "versions"
NAME_KEY = "versionName"
CODE_KEY = "versionCode"

NAME_PATTERN = re.compile(rf'^\s*{NAME_KEY}\s*=\s*"([^"]*)"\s*$', re.MULTILINE)
CODE_PATTERN = re.compile(rf'^\s*{CODE_KEY}\s*=\s*("?)\s*(-?\d+)\s*\1\s*$', re.MULTILINE)


class CatalogEntry(NamedTuple):
    """A published version paired with its build code."""
    version: CalendarVersion
    code: int


class VersionCatalog:
    """Codec for the version catalog file."""

    @staticmethod
    def serialize(version: CalendarVersion, code: int) -> str:
        return (
            f"[{SECTION}]\n"
            f'{NAME_KEY} = "{version}"\n'
            f'{CODE_KEY} = "{code}"\n'
        )

    @staticmethod
    def deserialize(content: str) -> CatalogEntry:
        """
        Read a catalog entry from file content.

        Raises:
            CatalogFormatError: If a key is missing or holds an invalid value.
        """
        name_match = NAME_PATTERN.search(content)
        if not name_match:
            raise CatalogFormatError(f"missing '{NAME_KEY}'")

        parsed = CalendarVersion.parse(name_match.group(1))
        if not parsed.ok:
            raise CatalogFormatError(str(parsed.error))
        if str(parsed.version) != name_match.group(1):
            raise CatalogFormatError(
                f"'{NAME_KEY}' is not exactly a calendar version: {name_match.group(1)!r}"
            )

        code_match = CODE_PATTERN.search(content)
        if not code_match:
            raise CatalogFormatError(f"missing or non-numeric '{CODE_KEY}'")

        code = int(code_match.group(2))
        if code < 1:
            raise CatalogFormatError(f"'{CODE_KEY}' must be positive, got {code}")

        return CatalogEntry(parsed.version, code)
