from __future__ import annotations

import re

from cvaudit.schemas.audit import DetectedLanguage, Issue, LanguageAnalysis
from cvaudit.schemas.profile import CVProfile

from .profile_text import extract_all_text

FRENCH_INDICATORS = (
    "je", "nous", "vous", "ai", "avec", "pour", "dans", "sur", "des", "les", "une", "est",
    "été", "mes", "mon", "notre", "leurs", "cette", "ce", "qui", "que", "dont",
    "gestion", "développement", "équipe", "années", "expérience", "compétences",
    "responsable", "projets", "clients", "entreprise", "formation", "diplôme",
)
ENGLISH_INDICATORS = (
    "i", "we", "you", "the", "and", "with", "for", "in", "on", "of", "is", "are", "was", "were",
    "my", "our", "your", "their", "this", "that", "which", "who", "what",
    "management", "development", "team", "years", "experience", "skills",
    "responsible", "projects", "clients", "company", "education", "degree", "led", "achieved",
)
GERMAN_INDICATORS = (
    "ich", "wir", "sie", "und", "mit", "für", "in", "auf", "der", "die", "das", "ist", "sind",
    "mein", "unser", "ihr", "diese", "dieses", "welche", "wer", "was",
    "führung", "entwicklung", "team", "jahre", "erfahrung", "kenntnisse",
    "verantwortlich", "projekte", "kunden", "firma", "ausbildung", "abschluss",
)

# A language needs strictly more distinct indicator hits than this to be identified.
MIN_INDICATOR_HITS = 5
MIXED_LANGUAGE_RATIO = 0.3
UNKNOWN_LANGUAGE_MIN_CHARS = 100

ACCEPTED_LANGUAGES: dict[str, tuple[DetectedLanguage, ...]] = {
    "FR": ("fr",),
    "BE": ("fr", "en"),
    "CH": ("fr", "de", "en", "it"),
    "CA": ("en", "fr"),
    "DE": ("de", "en"),
    "AT": ("de", "en"),
    "US": ("en",),
    "UK": ("en",),
    "GB": ("en",),
    "AU": ("en",),
    "ES": ("es", "en"),
    "IT": ("it", "en"),
    "LU": ("fr", "de", "en"),
}
DEFAULT_ACCEPTED_LANGUAGES: tuple[DetectedLanguage, ...] = ("en", "fr")

LANGUAGE_NAMES: dict[str, str] = {
    "fr": "French",
    "en": "English",
    "de": "German",
    "it": "Italian",
    "es": "Spanish",
    "unknown": "Unknown",
}

# (pattern, correction) pairs for frequent French misspellings.
FRENCH_TYPOS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bparmis\b", re.IGNORECASE), "parmi"),
    (re.compile(r"\bmalgrés\b", re.IGNORECASE), "malgré"),
    (re.compile(r"\bbiensur\b", re.IGNORECASE), "bien sûr"),
    (re.compile(r"\bcomme même\b", re.IGNORECASE), "quand même"),
    (re.compile(r"\bapperçu\b", re.IGNORECASE), "aperçu"),
    (re.compile(r"\bconnaisances\b", re.IGNORECASE), "connaissances"),
    (re.compile(r"\bprofessionel\b", re.IGNORECASE), "professionnel"),
    (re.compile(r"\bdévelopeur\b", re.IGNORECASE), "développeur"),
)
PASSIVE_VOICE_RE = re.compile(r"\b(was|were|been|being)\s+(asked|told|given|made|called|assigned)\b", re.IGNORECASE)


def _compile_indicators(words: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE) for word in words)


_FRENCH_PATTERNS = _compile_indicators(FRENCH_INDICATORS)
_ENGLISH_PATTERNS = _compile_indicators(ENGLISH_INDICATORS)
_GERMAN_PATTERNS = _compile_indicators(GERMAN_INDICATORS)


def _count_indicators(text: str, patterns: tuple[re.Pattern[str], ...]) -> int:
    return sum(1 for pattern in patterns if pattern.search(text))


def analyze_text_language(text: str) -> LanguageAnalysis:
    lowered = (text or "").lower()
    french_score = _count_indicators(lowered, _FRENCH_PATTERNS)
    english_score = _count_indicators(lowered, _ENGLISH_PATTERNS)
    german_score = _count_indicators(lowered, _GERMAN_PATTERNS)

    # Order matters: equal counts resolve to French, then English, then German.
    ranked: list[tuple[DetectedLanguage, int]] = [
        ("fr", french_score),
        ("en", english_score),
        ("de", german_score),
    ]
    max_score = max(score for _, score in ranked)
    total_score = sum(score for _, score in ranked)

    main_language: DetectedLanguage = "unknown"
    confidence = 0.0
    if max_score > MIN_INDICATOR_HITS:
        main_language = next(language for language, score in ranked if score == max_score)
        confidence = (max_score / total_score) * 100 if total_score else 0.0

    second_score = sorted((score for _, score in ranked), reverse=True)[1]
    is_mixed = max_score > MIN_INDICATOR_HITS and second_score > max_score * MIXED_LANGUAGE_RATIO

    return LanguageAnalysis(
        main_language=main_language,
        confidence=confidence,
        french_score=french_score,
        english_score=english_score,
        german_score=german_score,
        is_mixed=is_mixed,
    )


def detect_cv_language(profile: CVProfile) -> LanguageAnalysis:
    return analyze_text_language(extract_all_text(profile))


def accepted_languages(country: str) -> tuple[DetectedLanguage, ...]:
    return ACCEPTED_LANGUAGES.get((country or "").strip().upper(), DEFAULT_ACCEPTED_LANGUAGES)


def _slug(value: str) -> str:
    return re.sub(r"\s+", "-", value.strip().lower())


def detect_language_issues(profile: CVProfile, target_country: str | None = None) -> list[Issue]:
    issues: list[Issue] = []
    all_text = extract_all_text(profile)
    analysis = analyze_text_language(all_text)

    if analysis.is_mixed:
        issues.append(
            Issue(
                id="lang-mixed",
                category="critical",
                type="language",
                message="CV mixes several languages",
                suggestion="Write the whole CV in a single language",
                score_penalty=25,
            )
        )

    if target_country and analysis.main_language != "unknown":
        expected = accepted_languages(target_country)
        if analysis.main_language not in expected:
            expected_names = " or ".join(LANGUAGE_NAMES[language] for language in expected)
            issues.append(
                Issue(
                    id="lang-wrong-country",
                    category="critical",
                    type="language",
                    message=(
                        f"CV written in {LANGUAGE_NAMES[analysis.main_language]} "
                        f"is not suited to {target_country.strip().upper()}"
                    ),
                    suggestion=f"Write it in {expected_names}",
                    score_penalty=20,
                )
            )

    if analysis.main_language == "unknown" and len(all_text) > UNKNOWN_LANGUAGE_MIN_CHARS:
        issues.append(
            Issue(
                id="lang-unknown",
                category="warning",
                type="language",
                message="CV language could not be identified",
                suggestion="Use a standard language (FR, EN, DE) throughout",
                score_penalty=15,
            )
        )

    for pattern, correction in FRENCH_TYPOS:
        if pattern.search(all_text):
            issues.append(
                Issue(
                    id=f"lang-typo-{_slug(correction)}",
                    category="warning",
                    type="language",
                    message="Spelling mistake detected",
                    suggestion=f'Correct it to "{correction}"',
                    score_penalty=4,
                )
            )

    if PASSIVE_VOICE_RE.search(all_text):
        issues.append(
            Issue(
                id="lang-passive-voice",
                category="info",
                type="language",
                message="Passive voice detected",
                suggestion="Prefer the active voice for more impact",
                score_penalty=2,
            )
        )

    return issues
