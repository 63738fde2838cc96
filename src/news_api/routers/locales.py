"""Locale API endpoints."""

from fastapi import APIRouter

from news_api.models.locales import CountryInfo, LocalesResponse, ProvinceInfo, RegionInfo
from resolve_locales.regions import (
    REGION_TO_COUNTRIES,
    get_all_countries,
    get_country_name,
    get_provinces_for_country,
)

router = APIRouter(prefix="/locales", tags=["locales"])


@router.get("", response_model=LocalesResponse)
async def list_locales():
    """List supported regions, countries and provinces."""
    return LocalesResponse(
        regions=[
            RegionInfo(code=region, countries=list(countries))
            for region, countries in REGION_TO_COUNTRIES.items()
        ],
        countries=[
            CountryInfo(
                code=code,
                name=get_country_name(code),
                provinces=[
                    ProvinceInfo(code=province, name=name)
                    for province, name in get_provinces_for_country(code).items()
                ],
            )
            for code in get_all_countries()
        ],
    )
