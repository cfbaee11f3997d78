"""Per-country survey form profiles."""

from landcover_pipeline.countries.gtm import GTM
from landcover_pipeline.countries.hnd import HND
from landcover_pipeline.countries.layout import CountryProfile
from landcover_pipeline.countries.tun import TUN

PROFILES: dict[str, CountryProfile] = {profile.code: profile for profile in (GTM, HND, TUN)}

__all__ = ["GTM", "HND", "PROFILES", "TUN", "CountryProfile"]
