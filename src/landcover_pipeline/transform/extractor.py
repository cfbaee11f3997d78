"""Identity, geolocation and free-text fields resolved from country candidate paths."""

import re
from dataclasses import dataclass
from typing import Any, Union

from landcover_pipeline.countries.layout import CountryProfile, FieldPsu
from landcover_pipeline.transform.paths import first_present, first_text, is_blank

UNKNOWN_SITE = "UNKNOWN_SITE"
NO_PSU = "N/A"

_SITE_SEPARATOR = re.compile(r"[-_]")

Coordinate = Union[str, float]


@dataclass
class SiteFields:
    """Per-submission attributes that do not depend on the land-cover layout."""

    uuid: str = ""
    submission_time: str = ""
    site_id: str = UNKNOWN_SITE
    psu_id: str = NO_PSU
    province: str = ""
    surveyor: str = ""
    survey_date: str = ""
    latitude: Coordinate = ""
    longitude: Coordinate = ""
    elevation: Coordinate = ""
    landform: str = ""
    comments: str = ""
    surveyor_comments: str = ""


def derive_psu(data: Any, profile: CountryProfile, raw_site_id: str) -> str:
    """Parent sampling unit: site-id prefix, or a dedicated answer prefixed with the country code."""
    rule = profile.psu
    if isinstance(rule, FieldPsu):
        psu = first_text(data, (rule.field,))
        return f"{profile.code}{psu}" if psu else NO_PSU
    if not raw_site_id:
        return NO_PSU
    return _SITE_SEPARATOR.split(raw_site_id, maxsplit=1)[0]


def _coordinate(value: Any) -> Coordinate:
    if is_blank(value):
        return ""
    if isinstance(value, (int, float)):
        return float(value)
    return str(value)


def parse_geolocation(data: Any, profile: CountryProfile) -> tuple[Coordinate, Coordinate, Coordinate]:
    """
    (latitude, longitude, elevation) from the "lat lon elev" geopoint answer, else from
    the submission's [lat, lon] metadata pair (no elevation). Sources are never mixed.
    """
    geopoint = first_text(data, profile.geopoint_fields)
    if geopoint:
        parts = geopoint.split(" ") + ["", "", ""]
        return parts[0], parts[1], parts[2]
    pair = first_present(data, profile.geolocation_fields)
    if isinstance(pair, (list, tuple)) and len(pair) >= 2:
        return _coordinate(pair[0]), _coordinate(pair[1]), ""
    return "", "", ""


def survey_date(data: Any, profile: CountryProfile) -> str:
    """Survey day from `today`, else the date part of the `start` timestamp."""
    today = first_text(data, profile.survey_date_fields)
    if today:
        return today
    start = first_text(data, profile.survey_start_fields)
    return start.split("T")[0] if start else ""


def extract_site_fields(data: Any, profile: CountryProfile) -> SiteFields:
    """Resolve every non-land-cover attribute of one submission."""
    raw_site_id = first_text(data, profile.site_id_fields)
    latitude, longitude, elevation = parse_geolocation(data, profile)
    return SiteFields(
        uuid=first_text(data, profile.uuid_fields),
        submission_time=first_text(data, profile.submission_time_fields),
        site_id=raw_site_id or UNKNOWN_SITE,
        psu_id=derive_psu(data, profile, raw_site_id),
        province=first_text(data, profile.province_fields),
        surveyor=first_text(data, profile.surveyor_fields),
        survey_date=survey_date(data, profile),
        latitude=latitude,
        longitude=longitude,
        elevation=elevation,
        landform=first_text(data, profile.landform_fields),
        comments=first_text(data, profile.comments_fields),
        surveyor_comments=first_text(data, profile.surveyor_comments_fields),
    )
