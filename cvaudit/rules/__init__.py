from functools import lru_cache

from .countries import (
    CountryRule,
    CountryRuleTable,
    UnknownCountryError,
    paper_dimensions,
)


@lru_cache(maxsize=1)
def get_default_country_table() -> CountryRuleTable:
    return CountryRuleTable()


__all__ = [
    "CountryRule",
    "CountryRuleTable",
    "UnknownCountryError",
    "get_default_country_table",
    "paper_dimensions",
]
