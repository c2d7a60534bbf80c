"""
Calendar Version - Parse, generate and increment YYYY.MM.R versions
"""
import re
from typing import NamedTuple, Optional

# Four-digit year, zero-padded month, unpadded revision. Anchored at the
# start only, so "2024.05.4-free" parses as 2024.05.4.
VERSION_PATTERN = re.compile(r'(\d{4})\.(\d{2})\.(\d+)')

TAG_SEPARATOR = "-"


class ParseError(ValueError):
    """Text does not start with a calendar version."""


class ParseResult(NamedTuple):
    """Outcome of CalendarVersion.parse: a version or the reason there is none."""
    version: Optional["CalendarVersion"]
    error: Optional[ParseError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def get_or_none(self) -> Optional["CalendarVersion"]:
        return self.version

    def unwrap(self) -> "CalendarVersion":
        """Return the version or raise the carried ParseError."""
        if self.error is not None:
            raise self.error
        return self.version


class CalendarVersion(NamedTuple):
    """
    Immutable calendar version.

    Tuple ordering compares (year, month, revision) lexicographically,
    which is the release order of calendar versions.

    Example:
        v = CalendarVersion.generate(datetime(2024, 5, 17))  # 2024.05.1
        v.increment(datetime(2024, 5, 20))                   # 2024.05.2
        v.increment(datetime(2024, 6, 1))                    # 2024.06.1
    """
    year: int
    month: int
    revision: int

    @classmethod
    def generate(cls, point_in_time, revision: int = 1) -> "CalendarVersion":
        """
        Build a version from the year and month of a point in time.

        Args:
            point_in_time: datetime or date supplying year and month
            revision: Revision within the month, starting at 1

        Returns:
            New CalendarVersion.
        """
        if revision < 1:
            raise ValueError(f"Revision must be at least 1, got {revision}")
        return cls(point_in_time.year, point_in_time.month, revision)

    @classmethod
    def parse(cls, text) -> ParseResult:
        """
        Parse a version from the beginning of a string.

        Trailing content is ignored, so full tag names such as
        "2024.05.4-free" are accepted. Never raises; check the result.
        """
        if not isinstance(text, str):
            return ParseResult(None, ParseError(f"Expected a string, got {type(text).__name__}"))

        match = VERSION_PATTERN.match(text)
        if not match:
            return ParseResult(None, ParseError(f"Not a calendar version: {text!r}"))

        year, month, revision = (int(group) for group in match.groups())
        if not 1 <= month <= 12:
            return ParseResult(None, ParseError(f"Month out of range in {text!r}"))
        if revision < 1:
            return ParseResult(None, ParseError(f"Revision must be at least 1 in {text!r}"))

        return ParseResult(cls(year, month, revision), None)

    def increment(self, point_in_time) -> "CalendarVersion":
        """
        Next version after this one at the given point in time.

        A later month starts over at revision 1. The same month, or an
        earlier one (clock behind the last release), bumps the revision,
        so the result is always greater than this version.
        """
        if (point_in_time.year, point_in_time.month) > (self.year, self.month):
            return CalendarVersion(point_in_time.year, point_in_time.month, 1)
        return self._replace(revision=self.revision + 1)

    def tag(self, variant: Optional[str] = None) -> str:
        """Compose the tag name, with a "-variant" suffix for non-blank variants."""
        if variant and variant.strip():
            return f"{self}{TAG_SEPARATOR}{variant}"
        return str(self)

    def __str__(self) -> str:
        return f"{self.year:04d}.{self.month:02d}.{self.revision}"


def variant_of_tag(tag: str) -> str:
    """Return the part of a tag after the first separator, or "" if there is none."""
    _, separator, variant = tag.partition(TAG_SEPARATOR)
    return variant if separator else ""
