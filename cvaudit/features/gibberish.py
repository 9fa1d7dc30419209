"""Heuristic nonsense-text detection for short CV fragments.

Best effort only: unusual proper names can be flagged.
"""

from __future__ import annotations

import re
import unicodedata

KEYBOARD_PATTERNS = (
    "qwerty", "azerty", "asdfgh", "wxcvbn", "poiuyt", "mlkjhg",
    "zxcvbn", "123456", "654321", "abcdef", "fedcba", "uiop", "jklm", "bnm",
)

# Letter pairs that almost never occur in French or English words.
UNCOMMON_SEQUENCES = (
    "zj", "jz", "xj", "jx", "qz", "zq", "vq", "qv", "zx", "xz",
    "fz", "zf", "zh", "hz", "bz", "zb", "tz", "zt", "kz", "zk",
    "hj", "jh", "fk", "kf", "bf", "fb", "pz", "zp", "xh", "hx",
    "vh", "hv", "jn", "nj", "wz", "zw", "vz", "zv",
)

COMMON_MAIL_DOMAINS = (
    "gmail.com", "hotmail.com", "outlook.com", "yahoo.com",
    "icloud.com", "protonmail.com", "live.com", "msn.com",
)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_VOWEL_RE = re.compile(r"[aeiouy]")
_CONSONANT_RUN_5_RE = re.compile(r"[bcdfghjklmnpqrstvwxz]{5,}")
_CONSONANT_RUN_4_RE = re.compile(r"[bcdfghjklmnpqrstvwxz]{4,}")
_REPEATED_CHAR_RE = re.compile(r"(.)\1{2,}")
_WORD_PREFIX_RE = re.compile(r"^(pre|pro|con|com|dis|un|re|in|ex|de|en|em)")
_WORD_SUFFIX_RE = re.compile(r"(tion|ment|able|ible|ness|less|ful|ing|eur|ier|iere|eux|ence|ance|iste|isme)$")
_WORD_ENDING_RE = re.compile(r"(er|or|ar|ir|ur)$")
_COMMON_PAIR_RE = re.compile(r"[aeiouy]{2}|[aeiou][rs]|er|es|en|an|on|in|or|ar|ir|ur|ou|au|ai|ei|oi|eu|ea|io")
_COMMON_TLD_RE = re.compile(r"\.(com|net|org|fr|ch|de|io|co)$")


def normalize_text(text: str) -> str:
    """Lowercase, strip diacritics and keep only ``[a-z0-9]`` plus whitespace."""
    decomposed = unicodedata.normalize("NFD", (text or "").lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return _NON_ALNUM_RE.sub("", stripped)


def is_keyboard_mash(text: str) -> bool:
    lowered = (text or "").lower()
    return any(pattern in lowered for pattern in KEYBOARD_PATTERNS)


def _has_real_word_shape(cleaned: str) -> bool:
    return bool(
        _WORD_PREFIX_RE.search(cleaned)
        or _WORD_SUFFIX_RE.search(cleaned)
        or _WORD_ENDING_RE.search(cleaned)
    )


def is_gibberish(text: str) -> bool:
    cleaned = normalize_text(text)
    if len(cleaned) < 3:
        return False

    if is_keyboard_mash(cleaned):
        return True

    if len(cleaned) >= 6:
        vowels = len(_VOWEL_RE.findall(cleaned))
        if vowels / len(cleaned) < 0.15:
            return True

    if _CONSONANT_RUN_5_RE.search(cleaned):
        return True

    if _REPEATED_CHAR_RE.search(cleaned):
        return True

    if any(sequence in cleaned for sequence in UNCOMMON_SEQUENCES):
        return True

    # Short words (names such as "Blot") are only judged by the checks above.
    if len(cleaned) >= 7 and not _has_real_word_shape(cleaned):
        if _CONSONANT_RUN_4_RE.search(cleaned):
            return True

    if len(cleaned.split()) == 1 and len(cleaned) >= 8:
        if not _COMMON_PAIR_RE.search(cleaned):
            return True

    return False


def is_gibberish_email(email: str) -> bool:
    local_part, _, domain = (email or "").partition("@")
    if is_gibberish(local_part):
        return True

    is_common_domain = any(domain.endswith(known) for known in COMMON_MAIL_DOMAINS) or bool(
        _COMMON_TLD_RE.search(domain)
    )
    if not is_common_domain and is_gibberish(domain.split(".")[0]):
        return True
    return False
