from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

Zone = Literal["anglo-saxon", "germanic", "asian", "middle-east", "latin-europe"]
Disclosure = Literal["forbidden", "optional", "expected", "required"]
PaperSize = Literal["A4", "LETTER", "B4"]
PersonalInfoField = Literal["age", "birth_date", "marital_status", "nationality", "gender", "driver_license"]

_PAPER_DIMENSIONS: dict[str, tuple[int, int]] = {
    "LETTER": (612, 792),
    "B4": (729, 1032),
    "A4": (595, 842),
}


class UnknownCountryError(KeyError):
    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown country code '{self.code}'"


class _RuleModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PhotoPolicy(_RuleModel):
    allowed: bool
    required: bool
    recommended: bool
    size: Literal["small", "medium", "large"] | None = None


class PersonalInfoPolicy(_RuleModel):
    age: Disclosure
    birth_date: Disclosure
    marital_status: Literal["forbidden", "optional", "expected"]
    nationality: Disclosure
    gender: Literal["forbidden", "optional", "expected"]
    driver_license: Literal["optional", "expected"]


class DocumentFormat(_RuleModel):
    paper_size: PaperSize
    date_format: str
    max_pages: int = Field(ge=1)


class RegionalFeatures(_RuleModel):
    signature: bool = False
    stamp: bool = False
    visa_status: bool = False
    legal_footer: str | None = None
    blocked_fields: tuple[str, ...] = ()


class LanguageStyle(_RuleModel):
    use_action_verbs: bool
    power_verbs_required: bool
    metrics_expected: bool
    humility_level: Literal["assertive", "balanced", "humble"]
    team_emphasis: bool
    formality: Literal["casual", "professional", "formal", "ultra-formal"]


class CountryRule(_RuleModel):
    code: str
    name: str
    zone: Zone
    photo: PhotoPolicy
    personal_info: PersonalInfoPolicy
    format: DocumentFormat
    features: RegionalFeatures = Field(default_factory=RegionalFeatures)
    language_style: LanguageStyle


def paper_dimensions(paper_size: str) -> tuple[int, int]:
    """Page width and height in points (72 DPI); unknown sizes fall back to A4."""
    return _PAPER_DIMENSIONS.get(paper_size, _PAPER_DIMENSIONS["A4"])


class CountryRuleTable:
    def __init__(self, rules_path: str | Path | None = None) -> None:
        path = Path(rules_path) if rules_path else Path(__file__).with_name("countries.yaml")
        self._rules = self._load_rules(path)

    @staticmethod
    def _load_rules(path: Path) -> dict[str, CountryRule]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Failed to load country rules '{path}': {exc}") from exc

        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid country rules '{path}': expected a top-level mapping.")

        rules: dict[str, CountryRule] = {}
        for code, body in raw.items():
            normalized = str(code).strip().upper()
            payload: dict[str, Any] = dict(body or {})
            payload["code"] = normalized
            rules[normalized] = CountryRule.model_validate(payload)
        return rules

    @staticmethod
    def normalize_code(code: str) -> str:
        return (code or "").strip().upper()

    def get(self, code: str) -> CountryRule:
        normalized = self.normalize_code(code)
        rule = self._rules.get(normalized)
        if rule is None:
            raise UnknownCountryError(normalized or str(code))
        return rule

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.normalize_code(code) in self._rules

    def codes(self) -> list[str]:
        return list(self._rules)

    def all(self) -> list[CountryRule]:
        return list(self._rules.values())

    def by_zone(self, zone: str) -> list[CountryRule]:
        return [rule for rule in self._rules.values() if rule.zone == zone]

    def is_field_forbidden(self, code: str, field: PersonalInfoField) -> bool:
        return getattr(self.get(code).personal_info, field) == "forbidden"

    def should_show_photo(self, code: str) -> bool:
        photo = self.get(code).photo
        return photo.allowed and (photo.required or photo.recommended)

    def country_name(self, code: str) -> str:
        rule = self._rules.get(self.normalize_code(code))
        return rule.name if rule else code
