"""
Taiwan Rule Set - Default redaction rules for pod logs.

Patterns covered, in the order they are applied:
    - Bearer / Authorization tokens (whole "Bearer <value>" phrase)
    - Standalone JWT tokens
    - Taiwan National ID numbers
    - Email addresses
    - Taiwan mobile phone numbers
    - Taiwan landlines, with parenthesised or dashed area codes
    - Address unit numbers (號, 樓, 室, 之N)
    - Credit card numbers
    - Chinese names, only after a keyword such as 姓名 or 申請人

All patterns use ASCII classes: CJK characters are not word characters
for \\b, and \\d only matches 0-9.
"""

import re
from ..rules import AnchoredCaptureRule, RuleSet, WholeMatchRule

NAME_KEYWORDS = ("姓名", "申請人", "使用者", "客戶", "名字")


def _build_rules() -> tuple:
    return (
        # Bearer must come before the JWT rule so "Bearer eyJ..." is masked
        # as one unit instead of leaving "Bearer" behind.
        WholeMatchRule(
            name="bearer_token",
            pattern=re.compile(r'Bearer\s+\S+', re.ASCII | re.IGNORECASE),
            description="Bearer / Authorization token phrase"
        ),

        # base64url header.payload.signature
        WholeMatchRule(
            name="jwt_token",
            pattern=re.compile(
                r'eyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]*',
                re.ASCII
            ),
            description="Standalone JWT token"
        ),

        # One uppercase letter + 1 or 2 + 8 digits (e.g. A123456789)
        WholeMatchRule(
            name="national_id",
            pattern=re.compile(r'\b[A-Z][12]\d{8}\b', re.ASCII),
            description="Taiwan National ID"
        ),

        WholeMatchRule(
            name="email",
            pattern=re.compile(
                r'\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b',
                re.ASCII
            ),
            description="Email address"
        ),

        # 09xxxxxxxx, optionally split as 09xx-xxx-xxx or 09xx xxx xxx
        WholeMatchRule(
            name="mobile_phone",
            pattern=re.compile(r'\b09\d{2}[-\s]?\d{3}[-\s]?\d{3}\b', re.ASCII),
            description="Taiwan mobile phone"
        ),

        # (02)1234-5678
        WholeMatchRule(
            name="landline_parenthesized",
            pattern=re.compile(r'\(0\d{1,3}\)\s?\d{3,4}[-\s]?\d{3,4}', re.ASCII),
            description="Taiwan landline with parenthesised area code"
        ),

        # 02-1234-5678, 04-7654321
        WholeMatchRule(
            name="landline_dashed",
            pattern=re.compile(r'\b0\d{1,3}-\d{3,4}-?\d{3,4}\b', re.ASCII),
            description="Taiwan landline with dash separator"
        ),

        WholeMatchRule(
            name="address_unit",
            pattern=re.compile(r'\d+(?:-\d+)*(?:號|樓|室|之\d+)', re.ASCII),
            description="Address unit number (號, 樓, 室, 之N)"
        ),

        # Runs last: phone rules above take precedence on ambiguous digit runs
        WholeMatchRule(
            name="credit_card",
            pattern=re.compile(
                r'\b\d{4}[ -]?\d{4}[ -]?\d{4}[ -]?\d{1,4}\b',
                re.ASCII
            ),
            description="Credit card number (13-16 digits)"
        ),

        AnchoredCaptureRule(
            name="chinese_name",
            pattern=re.compile(
                r'((?:' + '|'.join(NAME_KEYWORDS) + r')[：:]\s*)([\u4e00-\u9fff]{2,4})',
                re.ASCII
            ),
            description="Chinese name after a name keyword"
        ),
    )


TAIWAN_RULE_SET = RuleSet(
    name="taiwan",
    description="Taiwan PII and credential patterns for pod logs",
    rules=_build_rules(),
)

# Export the default rule set
DEFAULT_RULE_SET = TAIWAN_RULE_SET
