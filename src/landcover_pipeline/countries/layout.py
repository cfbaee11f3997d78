"""Declarative description of how one country's survey form lays out its answers.

A `CountryProfile` lists candidate field paths for each logical attribute (tried in
priority order) and describes the land-cover section in one or both structural modes:

* array mode: a repeat group, one entry per land-cover component;
* flat mode: a single dominant group plus optional secondary/third vegetation flags.

Category-dependent lookups (which field names the crop, which min/max pair holds the
cover for a vegetation type) are dispatch tables keyed by the answer value, so a new
category is one new entry.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

from landcover_pipeline.transform.paths import FieldScope

DIRECTIONS = ("north", "east", "south", "west")

# Checklist markers for values that are not plain field reads
KIND = "<kind>"
CROP = "<crop>"

CropResolver = Callable[[FieldScope], str]


def crop_field(path: str) -> CropResolver:
    """Crop name is the answer of a single field."""

    def resolve(scope: FieldScope) -> str:
        return scope.text(path)

    return resolve


def crop_field_or_other(path: str, other_path: str) -> CropResolver:
    """Crop name field whose literal 'other' answer defers to a free-text field."""

    def resolve(scope: FieldScope) -> str:
        value = scope.text(path)
        if value == "other":
            return scope.text(other_path) or "other"
        return value

    return resolve


@dataclass(frozen=True)
class CropLookup:
    """Crop name resolution keyed by the crop-category answer."""

    category_field: str
    resolvers: Mapping[str, CropResolver] = field(default_factory=dict)

    def resolve(self, scope: FieldScope) -> str:
        resolver = self.resolvers.get(scope.text(self.category_field))
        return resolver(scope) if resolver else ""


@dataclass(frozen=True)
class CoverRange:
    """Min/max percentage-cover field pair."""

    minimum: str
    maximum: str


@dataclass(frozen=True)
class TypedCover:
    """Cover range chosen by the answer of a vegetation-type field."""

    type_field: str
    ranges: Mapping[str, CoverRange] = field(default_factory=dict)


Cover = Union[CoverRange, TypedCover]


@dataclass(frozen=True)
class DetailField:
    """One `label: value` entry of a component's detail string."""

    label: str
    path: str


@dataclass(frozen=True)
class ArrayLayout:
    """Land-cover section encoded as a repeat group."""

    paths: tuple[str, ...]
    checklist: tuple[DetailField, ...]
    crop: Optional[CropLookup] = None
    component_group: str = "dominant_landcover"
    kind_field: str = "landcover"
    cover_field: str = "Maximum"
    level1_field: str = "land_cover_types"
    site_level1_fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class KindLayout:
    """Flat-mode dominant component for one landcover kind."""

    group: str = ""
    checklist: tuple[DetailField, ...] = ()
    cover: Optional[Cover] = None
    crop: Optional[CropLookup] = None


@dataclass(frozen=True)
class ExtraVegetation:
    """Secondary/third vegetation component gated by a yes/no flag."""

    label: str
    flag_field: str
    type_field: str
    type_default: str
    cover: Cover
    group: str = ""
    classification: str = "vegetated"


@dataclass(frozen=True)
class FlatLayout:
    """Land-cover section encoded as one dominant group with optional extras."""

    base: str
    kinds: Mapping[str, KindLayout] = field(default_factory=dict)
    fallback: KindLayout = KindLayout()
    extras: tuple[ExtraVegetation, ...] = ()
    dominant_group: str = "dominant_landcover"
    kind_field: str = "landcover"
    level1_field: str = "land_cover_types"


@dataclass(frozen=True)
class SitePrefixPsu:
    """PSU id is the site id up to its first '-' or '_'."""


@dataclass(frozen=True)
class FieldPsu:
    """PSU id is a dedicated answer prefixed with the country code."""

    field: str


PsuRule = Union[SitePrefixPsu, FieldPsu]


@dataclass(frozen=True)
class PhotoLayout:
    """Candidate groups holding the four direction photos, in priority order."""

    groups: tuple[str, ...]
    field_template: str = "photo_{direction}"

    def photo_path(self, group: str, direction: str) -> str:
        return f"{group}/{self.field_template.format(direction=direction)}"


@dataclass(frozen=True)
class CountryProfile:
    """Everything the transformer needs to know about one country's form."""

    code: str
    name: str
    site_id_fields: tuple[str, ...]
    psu: PsuRule
    province_fields: tuple[str, ...]
    surveyor_fields: tuple[str, ...]
    geopoint_fields: tuple[str, ...]
    landform_fields: tuple[str, ...]
    comments_fields: tuple[str, ...]
    surveyor_comments_fields: tuple[str, ...]
    photos: PhotoLayout
    array: Optional[ArrayLayout] = None
    flat: Optional[FlatLayout] = None
    uuid_fields: tuple[str, ...] = ("meta/instanceID", "_uuid")
    submission_time_fields: tuple[str, ...] = ("_submission_time",)
    survey_date_fields: tuple[str, ...] = ("today",)
    survey_start_fields: tuple[str, ...] = ("start",)
    geolocation_fields: tuple[str, ...] = ("_geolocation",)
