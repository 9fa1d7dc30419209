from __future__ import annotations

import re

from .gibberish import is_gibberish, normalize_text

KNOWN_SKILLS: tuple[str, ...] = (
    # programming
    "javascript", "python", "java", "react", "angular", "vue", "node", "nodejs", "sql", "git", "docker",
    "kubernetes", "aws", "azure", "gcp", "linux", "windows", "macos", "excel", "word", "powerpoint",
    "photoshop", "figma", "sketch", "html", "css", "typescript", "php", "ruby", "go", "rust", "scala",
    "swift", "kotlin", "c++", "c#", "objective-c", "perl", "r", "matlab", "sas", "spss",
    # frameworks
    "nextjs", "nuxtjs", "express", "django", "flask", "spring", "laravel", "rails", "gatsby", "svelte",
    "tailwind", "bootstrap", "material", "ant design", "chakra",
    # databases
    "mongodb", "postgresql", "mysql", "redis", "elasticsearch", "dynamodb", "firebase", "supabase",
    # tools
    "jira", "confluence", "notion", "slack", "ms teams", "teams", "trello", "asana", "monday",
    # soft skills and methods
    "leadership", "management", "communication", "teamwork", "problem solving", "analytical",
    "agile", "agilite", "scrum", "kanban", "lean", "six sigma", "prince2", "pmp", "itil",
    # business
    "gestion de projet", "project management", "analyse", "analysis", "redaction", "writing",
    "marketing", "sales", "vente", "negociation", "negotiation", "finance", "accounting", "comptabilite",
    "strategie", "strategy", "consulting", "conseil", "audit", "compliance", "risk management",
    # spoken languages
    "francais", "anglais", "allemand", "espagnol", "italien", "portugais", "chinois", "japonais",
    "english", "french", "german", "spanish", "italian", "portuguese", "chinese", "japanese",
    # other tech
    "api", "rest", "graphql", "websocket", "microservices", "devops", "ci/cd", "cicd",
    "machine learning", "deep learning", "ai", "data science", "big data", "etl", "tableau", "power bi",
    "seo", "sem", "google analytics", "crm", "erp", "sap", "salesforce", "hubspot",
)

KNOWN_LANGUAGES: tuple[str, ...] = (
    "français", "francais", "french", "fr",
    "anglais", "english", "en",
    "allemand", "german", "deutsch", "de",
    "espagnol", "spanish", "español", "es",
    "italien", "italian", "italiano", "it",
    "portugais", "portuguese", "português", "pt",
    "chinois", "chinese", "mandarin", "中文", "zh",
    "japonais", "japanese", "日本語", "ja",
    "coréen", "korean", "한국어", "ko",
    "arabe", "arabic", "العربية", "ar",
    "russe", "russian", "русский", "ru",
    "néerlandais", "dutch", "nederlands", "nl",
    "suédois", "swedish", "svenska", "sv",
    "polonais", "polish", "polski", "pl",
    "turc", "turkish", "türkçe", "tr",
    "hindi", "हिन्दी", "hi",
    "bengali", "বাংলা", "bn",
    "grec", "greek", "ελληνικά", "el",
    "hébreu", "hebrew", "עברית", "he",
)

_ACRONYM_RE = re.compile(r"^[A-Z]{2,5}$")
_SKILL_SUFFIX_RE = re.compile(r"(tion|ment|able|ible|ness|ing|eur|ier|iere|eux|ence|ance|iste|isme|ure|age|sion)$")
_SKILL_PREFIX_RE = re.compile(
    r"^(gestion|analyse|developpement|conception|creation|formation|coordination|planification"
    r"|management|development|design|analysis|planning|consulting|engineering)"
)


def _normalize_entry(value: str) -> str:
    # Symbols in names such as "c++" or "ci/cd" are dropped on both sides.
    return normalize_text(value).strip()


_NORMALIZED_SKILLS: tuple[str, ...] = tuple(
    entry for entry in (_normalize_entry(skill) for skill in KNOWN_SKILLS) if entry
)


def _matches_vocabulary(normalized: str, vocabulary: tuple[str, ...]) -> bool:
    return any(entry in normalized or normalized in entry for entry in vocabulary)


def is_valid_skill(skill: str) -> bool:
    if not skill or len(skill) < 2:
        return False

    normalized = _normalize_entry(skill)
    if _matches_vocabulary(normalized, _NORMALIZED_SKILLS):
        return True

    if _ACRONYM_RE.match(skill.strip()):
        return True

    has_word_shape = bool(_SKILL_SUFFIX_RE.search(normalized) or _SKILL_PREFIX_RE.search(normalized))
    return has_word_shape and not is_gibberish(skill)


def is_valid_language(name: str) -> bool:
    return _matches_vocabulary((name or "").strip().lower(), KNOWN_LANGUAGES)
