"""
RedactionEngine - Masks PII in pod log text.

The engine applies each rule of its RuleSet in order, each pass scanning
the whole current text and masking every non-overlapping match. Masked
spans keep their length in code points.

Stateless across calls: the RuleSet is immutable, so one engine can be
shared by any number of threads without locking.
"""

import logging
from typing import Optional

from .profiles import DEFAULT_RULE_SET
from .rules import RuleSet

logger = logging.getLogger(__name__)


class RedactionEngine:
    """
    Engine for masking sensitive data in text.

    Example:
        engine = RedactionEngine()
        engine.redact("Phone: 0912345678")
        # "Phone: **********"
        engine.redact("姓名：歐美")
        # "姓名：**"
    """

    def __init__(self, rule_set: RuleSet = DEFAULT_RULE_SET):
        self._rule_set = rule_set
        logger.info(f"Redaction engine ready with rule set: {rule_set.name} ({len(rule_set)} rules)")

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def rule_names(self) -> list[str]:
        """Return rule names in application order."""
        return [rule.name for rule in self._rule_set]

    def redact(self, text: str) -> str:
        """
        Mask sensitive data in the given text.

        Args:
            text: The input text. Empty text is returned unchanged.

        Returns:
            The text with every detected span masked. Text that matches
            no rule is returned unchanged.
        """
        if not text:
            return text

        total = 0
        for rule in self._rule_set:
            text, count = rule.apply(text)
            if count:
                logger.debug(f"Rule '{rule.name}' masked {count} span(s)")
                total += count

        if total:
            logger.debug(f"Masked {total} span(s) with rule set '{self._rule_set.name}'")
        return text

    def redact_batch(self, texts: list[str]) -> list[str]:
        """Mask each text in order."""
        return [self.redact(text) for text in texts]


# Built on first use, then shared for the process lifetime
_default_engine: Optional[RedactionEngine] = None


def get_default_engine() -> RedactionEngine:
    """Get the process-wide RedactionEngine built on the default rule set."""
    global _default_engine
    if _default_engine is None:
        _default_engine = RedactionEngine()
    return _default_engine


def mask_pii(text: str) -> str:
    """Mask PII in text with the default engine."""
    return get_default_engine().redact(text)
