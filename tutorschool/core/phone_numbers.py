"""
Phone number normalisation for student records.

Stored numbers are kept in national form with the dialing code in a
separate field. Bulk imports produced numbers with the dialing code
embedded or duplicated; normalize_phone() repairs those shapes and leaves
everything else untouched, so applying it twice changes nothing.

Dependencies: re (stdlib)
System role: Pure logic behind the phone number maintenance job
"""

import re
from dataclasses import dataclass

DEFAULT_COUNTRY_CODE = "+7"
# Duplicate-prefix rules only fire when a full national number remains
MIN_NATIONAL_DIGITS = 10

_NON_DIGITS = re.compile(r"[^\d+]")


@dataclass(frozen=True)
class PhoneFix:
    """Normalised phone number and the rule that produced it."""

    phone: str
    country_code: str
    rule: str


def _is_russian_trunk_number(digits: str, cc: str) -> bool:
    return cc == "+7" and len(digits) == 11 and digits[0] in "78" and digits.isdigit()


def _strip_prefix(rest: str, cc: str, rule: str) -> PhoneFix:
    # A stripped dialing code can leave an 11-digit trunk number behind
    if _is_russian_trunk_number(rest, cc):
        rest = rest[1:]
    return PhoneFix(rest, cc, rule)


def normalize_phone(phone: str | None, country_code: str | None = None) -> PhoneFix | None:
    """
    Normalise a stored phone number.

    Rules, in order:
      - "+<cc><cc>rest": duplicated dialing code, keep rest
      - "+<cc>rest": dialing code embedded, keep rest
      - 11 digits starting with 7 or 8 under +7: Russian prefix, keep last 10
      - "<cc><cc>rest": duplicated dialing code without plus, keep rest
      - spaces, dashes or brackets only: keep the digits

    A remainder left by stripping a dialing code also loses its 7/8 trunk
    prefix when it is an 11-digit Russian number, so one pass is final.

    Args:
        phone: Stored number, may contain spaces or dashes
        country_code: Stored dialing code, "+7" when missing

    Returns:
        PhoneFix if the number needs rewriting, None if already normal or
        not a recognised shape
    """
    if not phone:
        return None

    cc = country_code or DEFAULT_COUNTRY_CODE
    if not cc.startswith("+"):
        cc = f"+{cc}"
    cc_digits = cc[1:]
    if not cc_digits.isdigit():
        return None

    raw = str(phone)
    compact = _NON_DIGITS.sub("", raw)
    if not compact:
        return None

    duplicated = cc_digits + cc_digits
    if compact.startswith("+" + duplicated) and len(compact) - len(duplicated) - 1 >= MIN_NATIONAL_DIGITS:
        return _strip_prefix(compact[len(duplicated) + 1:], cc, "duplicate_country_code")
    if compact.startswith(cc):
        return _strip_prefix(compact[len(cc):], cc, "embedded_country_code")
    if _is_russian_trunk_number(compact, cc):
        return PhoneFix(compact[1:], "+7", "russian_prefix")
    if compact.startswith(duplicated) and len(compact) - len(duplicated) >= MIN_NATIONAL_DIGITS:
        return _strip_prefix(compact[len(duplicated):], cc, "duplicate_country_code")
    if compact != raw and compact.isdigit():
        return PhoneFix(compact, cc, "formatting")
    return None
