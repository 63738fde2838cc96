"""Locale Pydantic models."""

from pydantic import BaseModel, Field


class ProvinceInfo(BaseModel):
    code: str
    name: str


class CountryInfo(BaseModel):
    code: str
    name: str
    provinces: list[ProvinceInfo] = Field(default_factory=list)


class RegionInfo(BaseModel):
    code: str
    countries: list[str]


class LocalesResponse(BaseModel):
    """Supported regions, countries and provinces for filter controls."""

    regions: list[RegionInfo]
    countries: list[CountryInfo]
