"""Registry for looking up country profiles and building their transformers."""

from typing import Optional

from landcover_pipeline.countries import PROFILES
from landcover_pipeline.countries.layout import CountryProfile
from landcover_pipeline.transform.transformer import Clock, SurveyTransformer


class CountryRegistry:
    """Discovers country profiles and provides transformers bound to them."""

    _profiles: dict[str, CountryProfile] = PROFILES

    @classmethod
    def profile(cls, country_code: str) -> CountryProfile:
        """Profile for a country code (case-insensitive)."""
        profile = cls._profiles.get(country_code.strip().upper())
        if not profile:
            raise ValueError(
                f"Unknown country: {country_code}. Available: {list(cls._profiles.keys())}"
            )
        return profile

    @classmethod
    def get(cls, country_code: str, clock: Optional[Clock] = None) -> SurveyTransformer:
        """Transformer for the given country."""
        return SurveyTransformer(cls.profile(country_code), clock=clock)

    @classmethod
    def available_countries(cls) -> list[str]:
        """Return list of available country codes."""
        return list(cls._profiles.keys())
