"""
Rule Set Profiles

Each module here builds one immutable RuleSet at import time.

Available profiles:
    - taiwan: Taiwan PII (national ID, phones, addresses, names) plus
      bearer tokens, JWTs, emails and card numbers. This is the default.
"""

from .taiwan import DEFAULT_RULE_SET, NAME_KEYWORDS, TAIWAN_RULE_SET

__all__ = ["DEFAULT_RULE_SET", "NAME_KEYWORDS", "TAIWAN_RULE_SET"]
