"""
PII Masking - Log sanitization for Kube Pod Sentinel

This module masks personal data (IDs, contact details, address numbers,
names) and credentials in pod logs before they are returned to AI agents.
Every masked character becomes one '*', so the shape of the log survives.

Architecture:
    - RedactionEngine: applies a RuleSet to text, pass by pass
    - WholeMatchRule / AnchoredCaptureRule: the two kinds of rule
    - profiles/: the fixed rule sets

Example:
    from pii_masking import mask_pii

    mask_pii("Email: user@example.com")
    # "Email: ****************"
"""

from .engine import RedactionEngine, get_default_engine, mask_pii
from .rules import MASK_CHAR, AnchoredCaptureRule, RuleSet, WholeMatchRule, mask_runes

__all__ = [
    "RedactionEngine",
    "get_default_engine",
    "mask_pii",
    "MASK_CHAR",
    "AnchoredCaptureRule",
    "RuleSet",
    "WholeMatchRule",
    "mask_runes",
]
