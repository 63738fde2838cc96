"""Detect country and province names mentioned in a free-text query."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from resolve_locales.regions import find_province_code, get_province_name

# Checked in order; multi-word names come before their substrings.
COUNTRY_ALIASES: tuple[tuple[str, str], ...] = (
    ("south africa", "za"),
    ("nigeria", "ng"),
    ("kenya", "ke"),
    ("egypt", "eg"),
    ("ghana", "gh"),
    ("united kingdom", "gb"),
    ("uk", "gb"),
    ("france", "fr"),
    ("germany", "de"),
    ("italy", "it"),
    ("spain", "es"),
    ("united states", "us"),
    ("usa", "us"),
    ("canada", "ca"),
    ("brazil", "br"),
    ("mexico", "mx"),
    ("argentina", "ar"),
    ("india", "in"),
    ("japan", "jp"),
    ("south korea", "kr"),
    ("singapore", "sg"),
    ("indonesia", "id"),
    ("saudi arabia", "sa"),
    ("united arab emirates", "ae"),
    ("uae", "ae"),
    ("israel", "il"),
    ("qatar", "qa"),
    ("australia", "au"),
    ("new zealand", "nz"),
)


@dataclass(frozen=True)
class DetectedLocation:
    country: Optional[str]
    province: Optional[str]
    remaining_query: str


def _strip(pattern: str, text: str) -> str:
    return re.sub(pattern, "", text, flags=re.IGNORECASE).strip()


def detect_location_in_query(query: str) -> DetectedLocation:
    """Pull a country and province out of a query, returning what's left."""
    if not query or not query.strip():
        return DetectedLocation(country=None, province=None, remaining_query=query or "")

    remaining = query
    country = None
    for name, code in COUNTRY_ALIASES:
        pattern = rf"\b{re.escape(name)}\b"
        if re.search(pattern, query, flags=re.IGNORECASE):
            country = code
            remaining = _strip(pattern, remaining)
            break

    province = find_province_code(remaining, country)
    if province:
        name = get_province_name(province)
        if name:
            remaining = _strip(rf"\b{re.escape(name)}\b", remaining)
        remaining = _strip(re.escape(province), remaining)

    remaining = re.sub(r"[,\s]+", " ", remaining).strip()
    return DetectedLocation(country=country, province=province, remaining_query=remaining)
