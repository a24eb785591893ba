"""
Redaction Rules - Value types for masking sensitive data in text.

Two kinds of rule exist, and the set is closed:
    - WholeMatchRule: the whole match is replaced by mask characters
    - AnchoredCaptureRule: a keyword prefix is kept, only the captured
      payload after it is masked

Masks are measured in code points, so "歐美" becomes "**" and not one
mask character per UTF-8 byte.

A RuleSet holds the rules in the order they are applied. Order matters:
a rule whose match contains another rule's match must come first.
"""

from dataclasses import dataclass
from typing import Pattern, Union
import re

MASK_CHAR = "*"

# Long enough to trip any rule that could match inside a masked span
_MASK_PROBE_LENGTH = 64


def mask_runes(span: str) -> str:
    """Return MASK_CHAR repeated once per code point of span."""
    return MASK_CHAR * len(span)


@dataclass(frozen=True)
class WholeMatchRule:
    """A rule that masks every character of its match."""
    name: str  # e.g., "email", "mobile_phone"
    pattern: Pattern[str]
    description: str = ""

    def apply(self, text: str) -> tuple[str, int]:
        return self.pattern.subn(self._replace, text)

    def _replace(self, match: re.Match) -> str:
        return mask_runes(match.group(0))


@dataclass(frozen=True)
class AnchoredCaptureRule:
    """
    A rule whose pattern has two groups: group 1 is the keyword and
    separator, copied through unchanged; group 2 is the payload, masked.

    A match that does not split into both groups is masked whole.
    """
    name: str
    pattern: Pattern[str]
    description: str = ""

    def apply(self, text: str) -> tuple[str, int]:
        return self.pattern.subn(self._replace, text)

    def _replace(self, match: re.Match) -> str:
        if self.pattern.groups < 2:
            return mask_runes(match.group(0))
        prefix, capture = match.group(1), match.group(2)
        if prefix is None or capture is None:
            return mask_runes(match.group(0))
        return prefix + mask_runes(capture)


RedactionRule = Union[WholeMatchRule, AnchoredCaptureRule]


@dataclass(frozen=True)
class RuleSet:
    """
    An ordered, immutable sequence of rules.

    Construction fails if any rule matches a run of mask characters:
    later passes would otherwise re-mask (or partially unmask the
    shape of) spans that earlier passes already handled.
    """
    name: str
    description: str
    rules: tuple[RedactionRule, ...]

    def __post_init__(self):
        probe = MASK_CHAR * _MASK_PROBE_LENGTH
        for rule in self.rules:
            if rule.pattern.search(probe):
                raise ValueError(
                    f"Rule '{rule.name}' matches masked text; "
                    f"choose a pattern that cannot match {MASK_CHAR!r}"
                )

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return f"<RuleSet: {self.name} ({len(self.rules)} rules)>"
