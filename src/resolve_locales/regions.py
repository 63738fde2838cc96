"""Static region, country and province tables with pure lookups."""

from __future__ import annotations

import re
from types import MappingProxyType

REGION_TO_COUNTRIES = MappingProxyType({
    "africa": ("za", "ng", "ke", "eg", "gh"),
    "europe": ("gb", "fr", "de", "it", "es"),
    "americas": ("us", "ca", "br", "mx", "ar"),
    "asia": ("in", "jp", "kr", "sg", "id"),
    # Egypt is listed under both Africa and the Middle East
    "middle_east": ("sa", "ae", "il", "qa", "eg"),
    "oceania": ("au", "nz"),
})

COUNTRY_NAMES = MappingProxyType({
    "za": "South Africa",
    "ng": "Nigeria",
    "ke": "Kenya",
    "eg": "Egypt",
    "gh": "Ghana",
    "gb": "United Kingdom",
    "fr": "France",
    "de": "Germany",
    "it": "Italy",
    "es": "Spain",
    "us": "United States",
    "ca": "Canada",
    "br": "Brazil",
    "mx": "Mexico",
    "ar": "Argentina",
    "in": "India",
    "jp": "Japan",
    "kr": "South Korea",
    "sg": "Singapore",
    "id": "Indonesia",
    "sa": "Saudi Arabia",
    "ae": "United Arab Emirates",
    "il": "Israel",
    "qa": "Qatar",
    "au": "Australia",
    "nz": "New Zealand",
})

COUNTRY_LANGUAGES = MappingProxyType({
    "fr": "fr",
    "de": "de",
    "it": "it",
    "es": "es",
    "br": "pt",
    "mx": "es",
    "ar": "es",
    "jp": "ja",
    "kr": "ko",
    "id": "id",
    "sa": "ar",
    "ae": "ar",
    "il": "he",
    "qa": "ar",
    "eg": "ar",
})
DEFAULT_LANGUAGE = "en"

PROVINCES = MappingProxyType({
    "za": MappingProxyType({
        "za-ec": "Eastern Cape",
        "za-fs": "Free State",
        "za-gp": "Gauteng",
        "za-kzn": "KwaZulu-Natal",
        "za-lp": "Limpopo",
        "za-mp": "Mpumalanga",
        "za-nc": "Northern Cape",
        "za-nw": "North West",
        "za-wc": "Western Cape",
    }),
    "ca": MappingProxyType({
        "ca-ab": "Alberta",
        "ca-bc": "British Columbia",
        "ca-mb": "Manitoba",
        "ca-nb": "New Brunswick",
        "ca-nl": "Newfoundland and Labrador",
        "ca-ns": "Nova Scotia",
        "ca-nt": "Northwest Territories",
        "ca-nu": "Nunavut",
        "ca-on": "Ontario",
        "ca-pe": "Prince Edward Island",
        "ca-qc": "Quebec",
        "ca-sk": "Saskatchewan",
        "ca-yt": "Yukon",
    }),
    "au": MappingProxyType({
        "au-act": "Australian Capital Territory",
        "au-nsw": "New South Wales",
        "au-nt": "Northern Territory",
        "au-qld": "Queensland",
        "au-sa": "South Australia",
        "au-tas": "Tasmania",
        "au-vic": "Victoria",
        "au-wa": "Western Australia",
    }),
    "us": MappingProxyType({
        "us-al": "Alabama", "us-ak": "Alaska", "us-az": "Arizona",
        "us-ar": "Arkansas", "us-ca": "California", "us-co": "Colorado",
        "us-ct": "Connecticut", "us-de": "Delaware",
        "us-dc": "District of Columbia", "us-fl": "Florida",
        "us-ga": "Georgia", "us-hi": "Hawaii", "us-id": "Idaho",
        "us-il": "Illinois", "us-in": "Indiana", "us-ia": "Iowa",
        "us-ks": "Kansas", "us-ky": "Kentucky", "us-la": "Louisiana",
        "us-me": "Maine", "us-md": "Maryland", "us-ma": "Massachusetts",
        "us-mi": "Michigan", "us-mn": "Minnesota", "us-ms": "Mississippi",
        "us-mo": "Missouri", "us-mt": "Montana", "us-ne": "Nebraska",
        "us-nv": "Nevada", "us-nh": "New Hampshire", "us-nj": "New Jersey",
        "us-nm": "New Mexico", "us-ny": "New York",
        "us-nc": "North Carolina", "us-nd": "North Dakota", "us-oh": "Ohio",
        "us-ok": "Oklahoma", "us-or": "Oregon", "us-pa": "Pennsylvania",
        "us-ri": "Rhode Island", "us-sc": "South Carolina",
        "us-sd": "South Dakota", "us-tn": "Tennessee", "us-tx": "Texas",
        "us-ut": "Utah", "us-vt": "Vermont", "us-va": "Virginia",
        "us-wa": "Washington", "us-wv": "West Virginia",
        "us-wi": "Wisconsin", "us-wy": "Wyoming",
    }),
})


def get_countries_for_region(region: str) -> list[str]:
    return list(REGION_TO_COUNTRIES.get(region, ()))


def get_all_countries() -> list[str]:
    """All countries across regions, in table order, without duplicates."""
    seen: dict[str, None] = {}
    for countries in REGION_TO_COUNTRIES.values():
        for code in countries:
            seen.setdefault(code, None)
    return list(seen)


def get_country_name(code: str) -> str:
    return COUNTRY_NAMES.get(code, code.upper())


def get_language_for_country(code: str | None) -> str:
    if not code:
        return DEFAULT_LANGUAGE
    return COUNTRY_LANGUAGES.get(code, DEFAULT_LANGUAGE)


def get_provinces_for_country(country: str) -> dict[str, str]:
    return dict(PROVINCES.get(country, {}))


def get_all_provinces() -> dict[str, str]:
    provinces: dict[str, str] = {}
    for country_provinces in PROVINCES.values():
        provinces.update(country_provinces)
    return provinces


def get_province_name(code: str) -> str | None:
    return get_all_provinces().get(code)


def get_province_country(code: str) -> str | None:
    """Owning country of a province code."""
    for country, country_provinces in PROVINCES.items():
        if code in country_provinces:
            return country
    return None


def find_province_code(text: str, country: str | None = None) -> str | None:
    """Find the first province whose display name appears as a phrase in text.

    Searches only the given country's provinces when a country is known.
    Longer names are tried first so "West Virginia" wins over "Virginia".
    """
    if not text:
        return None
    candidates = get_provinces_for_country(country) if country else get_all_provinces()
    lowered = text.lower()
    for code, name in sorted(candidates.items(), key=lambda kv: -len(kv[1])):
        if re.search(rf"\b{re.escape(name.lower())}\b", lowered):
            return code
    return None
