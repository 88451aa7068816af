"""
Line-oriented editing of pubspec.yaml sections.

pubspec.yaml is never parsed as YAML. A section is located by a fixed
indentation anchor ("  assets:") and its body is every following line that
matches one of the section's continuation patterns. Everything outside the
located range is kept byte for byte, line endings included.

The matching rules live in SectionRules so another matcher (a real YAML
round-trip parser, for instance) can be swapped in behind find_section.
"""

import re
from dataclasses import dataclass
from typing import List, Pattern, Sequence, Tuple

from ..errors import SectionNotFound

# A new top-level key under "flutter:" (two spaces, then a word character)
TOP_LEVEL_KEY = re.compile(r"^  \w")
BLANK_LINE = re.compile(r"^\s*$")

_NEWLINE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class SectionRules:
    """How to recognise one manifest section."""
    name: str
    anchor: Pattern
    continuations: Tuple[Pattern, ...]
    top_level_key: Pattern = TOP_LEVEL_KEY

    @property
    def anchor_line(self) -> str:
        return f"  {self.name}:"

    def is_anchor(self, line: str) -> bool:
        return bool(self.anchor.match(line))

    def is_body_line(self, line: str) -> bool:
        """True while the scan should keep consuming lines."""
        if self.top_level_key.match(line):
            return False
        return any(p.match(line) for p in self.continuations)


def _anchor(name: str) -> Pattern:
    # Trailing whitespace and a comment are tolerated, an inline value is not
    return re.compile(rf"^  {re.escape(name)}:\s*(#.*)?$")


ASSETS_SECTION = SectionRules(
    name="assets",
    anchor=_anchor("assets"),
    continuations=(
        re.compile(r"^    - assets/"),
        re.compile(r"^    - assets\\"),
        BLANK_LINE,
    ),
)

FONTS_SECTION = SectionRules(
    name="fonts",
    anchor=_anchor("fonts"),
    continuations=(
        re.compile(r"^    - family:"),
        re.compile(r"^      fonts:"),
        re.compile(r"^        - asset:"),
        re.compile(r"^          weight:"),
        re.compile(r"^          style:"),
        BLANK_LINE,
    ),
)


def find_section(lines: Sequence[str], rules: SectionRules) -> Tuple[int, int]:
    """
    Locate the first section matching rules.

    Returns:
        (start, stop): index of the anchor line and index of the first line
        after the body (exclusive)

    Raises:
        SectionNotFound: no line matches the anchor
    """
    start = next((i for i, line in enumerate(lines) if rules.is_anchor(line)), None)
    if start is None:
        raise SectionNotFound(rules.name)

    stop = start + 1
    while stop < len(lines) and rules.is_body_line(lines[stop]):
        stop += 1
    return start, stop


def _check_body(rules: SectionRules, new_body: Sequence[str]):
    if not new_body or not rules.is_anchor(new_body[0]):
        raise ValueError(f"Replacement for '{rules.name}' must start with {rules.anchor_line!r}")


def replace_section(lines: Sequence[str], rules: SectionRules, new_body: Sequence[str]) -> List[str]:
    """Return lines with the section's anchor and body swapped for new_body."""
    _check_body(rules, new_body)
    start, stop = find_section(lines, rules)
    return list(lines[:start]) + list(new_body) + list(lines[stop:])


class ManifestDocument:
    """
    An ordered list of text lines, addressed by 0-based index.

    Each line's terminator is remembered separately so a document that is
    read and written back unchanged is byte-identical.
    """

    def __init__(self, lines: Sequence[str], endings: Sequence[str] = None, newline: str = "\n"):
        self.lines: List[str] = list(lines)
        if endings is None:
            endings = [newline] * len(self.lines)
        if len(endings) != len(self.lines):
            raise ValueError("lines and endings must have the same length")
        self.endings: List[str] = list(endings)
        self.newline = newline

    @classmethod
    def from_text(cls, text: str) -> "ManifestDocument":
        lines, endings = [], []
        pos = 0
        for match in _NEWLINE.finditer(text):
            lines.append(text[pos:match.start()])
            endings.append(match.group())
            pos = match.end()
        if pos < len(text):
            lines.append(text[pos:])
            endings.append("")

        # new lines follow the first terminated line
        newline = next((e for e in endings if e), "\n")
        return cls(lines, endings, newline)

    def to_text(self) -> str:
        return "".join(line + ending for line, ending in zip(self.lines, self.endings))

    def __len__(self) -> int:
        return len(self.lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ManifestDocument):
            return NotImplemented
        return self.lines == other.lines and self.endings == other.endings

    def has_section(self, rules: SectionRules) -> bool:
        return any(rules.is_anchor(line) for line in self.lines)

    def find_section(self, rules: SectionRules) -> Tuple[int, int]:
        return find_section(self.lines, rules)

    def section_lines(self, rules: SectionRules) -> List[str]:
        """Anchor plus body lines of the section."""
        start, stop = self.find_section(rules)
        return self.lines[start:stop]

    def replace_section(self, rules: SectionRules, new_body: Sequence[str]) -> "ManifestDocument":
        """
        Return a new document with the section replaced by new_body.

        new_body must start with the anchor line. Lines outside the section
        keep their text and terminators. This document is not modified.
        """
        _check_body(rules, new_body)
        start, stop = self.find_section(rules)

        body_endings = [self.newline] * len(new_body)
        if stop == len(self.lines) and self.endings[-1] == "":
            # Section ran to end of file without a final newline
            body_endings[-1] = ""

        return ManifestDocument(
            self.lines[:start] + list(new_body) + self.lines[stop:],
            self.endings[:start] + body_endings + self.endings[stop:],
            self.newline,
        )
