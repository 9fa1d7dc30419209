from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ProfileModel(BaseModel):
    """Base for editor payloads: camelCase or snake_case keys, nulls fall back to defaults."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ContactInfo(ProfileModel):
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    website: str = ""


class PersonalInfo(ProfileModel):
    first_name: str = ""
    last_name: str = ""
    title: str = ""
    photo_url: str = ""
    birth_date: str = ""
    nationality: str = ""
    permit: str = ""
    mobility: str = ""
    contact: ContactInfo = Field(default_factory=ContactInfo)


class DateRange(ProfileModel):
    start: str = ""
    end: str = ""
    is_current: bool = False
    display_string: str = ""


class Experience(ProfileModel):
    id: str = ""
    role: str = ""
    company: str = ""
    location: str = ""
    date_range: DateRange | None = None
    dates: str = ""
    tasks: list[str] = Field(default_factory=list)


class Education(ProfileModel):
    id: str = ""
    degree: str = ""
    school: str = ""
    year: str = ""
    description: str = ""


class LanguageEntry(ProfileModel):
    name: str = ""
    level: str = ""


class CVProfile(ProfileModel):
    id: str = ""
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experiences: list[Experience] = Field(default_factory=list)
    educations: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    languages: list[LanguageEntry] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
