"""Lexical matcher for pixel length literals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import re
from typing import TYPE_CHECKING, Final

from nopx.errors import InvalidMagnitude

if TYPE_CHECKING:
    from nopx.scan.policy import IgnorePolicy

# ASCII digits only. No delimiter requirement on either side: `foo16px` yields `16px`.
PX_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+(?:\.[0-9]+)?px")


@dataclass(frozen=True, slots=True)
class PixelMatch:
    """One pixel literal located in a text snapshot."""

    raw_value: str
    line: int
    column: int
    context: str
    offset: int

    @property
    def end_offset(self) -> int:
        return self.offset + len(self.raw_value)


def find_pixel_literals(text: str) -> Iterator[PixelMatch]:
    """Yield every pixel literal in `text`, line by line, left to right.

    Each call walks the text from the start; nothing is shared between calls.
    """
    line_start = 0
    for line_number, line in enumerate(text.split("\n"), start=1):
        context: str | None = None
        for match in PX_PATTERN.finditer(line):
            if context is None:
                context = line.strip()
            yield PixelMatch(
                raw_value=match.group(0),
                line=line_number,
                column=match.start() + 1,
                context=context,
                offset=line_start + match.start(),
            )
        line_start += len(line) + 1


def count_pixel_literals(text: str, policy: IgnorePolicy | None = None) -> int:
    """Count literals in `text` that `policy` does not ignore.

    With a policy, literals too large for a float are not counted, matching
    what a batch conversion would touch.
    """
    if policy is None:
        return sum(1 for _ in find_pixel_literals(text))
    count = 0
    for match in find_pixel_literals(text):
        try:
            if not policy.ignores_raw(match.raw_value):
                count += 1
        except InvalidMagnitude:
            continue
    return count
