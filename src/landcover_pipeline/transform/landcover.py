"""Land-cover component assembly for repeat-group (array) and flat form layouts."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from landcover_pipeline.countries.layout import (
    CROP,
    KIND,
    ArrayLayout,
    CountryProfile,
    Cover,
    CoverRange,
    CropLookup,
    DetailField,
    FlatLayout,
    TypedCover,
)
from landcover_pipeline.models.record import LandCoverComponent
from landcover_pipeline.transform.parsers import Number, parse_number, resolve_cover_range
from landcover_pipeline.transform.paths import FieldScope, first_text, lookup, text

logger = logging.getLogger(__name__)

DETAIL_SEPARATOR = " | "


@dataclass
class LandCoverResult:
    """Level-1 label and ordered components extracted from one submission."""

    mode: str = "none"
    level1: str = ""
    components: list[LandCoverComponent] = field(default_factory=list)


def resolve_cover(scope: FieldScope, cover: Optional[Cover]) -> Number:
    """Percentage for a cover source: a fixed min/max pair or one chosen by vegetation type."""
    if cover is None:
        return 0
    if isinstance(cover, TypedCover):
        chosen: Optional[CoverRange] = cover.ranges.get(scope.text(cover.type_field))
        if chosen is None:
            return 0
        cover = chosen
    return resolve_cover_range(scope.get(cover.minimum), scope.get(cover.maximum))


def build_details(
    scope: FieldScope,
    checklist: tuple[DetailField, ...],
    kind: str = "",
    crop: Optional[CropLookup] = None,
) -> str:
    """`label: value` pairs for answered checklist entries, in checklist order."""
    parts: list[str] = []
    for entry in checklist:
        if entry.path == KIND:
            value = kind
        elif entry.path == CROP:
            value = crop.resolve(scope) if crop else ""
        else:
            raw = scope.get(entry.path)
            # Numeric 0 counts as unanswered in detail strings
            value = "" if isinstance(raw, (int, float)) and raw == 0 else text(raw)
        if value:
            parts.append(f"{entry.label}: {value}")
    return DETAIL_SEPARATOR.join(parts)


def find_repeat_group(data: Any, layout: ArrayLayout) -> Optional[tuple[str, list]]:
    """First candidate repeat-group path holding a non-empty list, with its entries."""
    for path in layout.paths:
        entries = lookup(data, path)
        if isinstance(entries, list) and entries:
            return path, entries
    return None


def assemble_array(data: Any, layout: ArrayLayout, path: str, entries: list) -> LandCoverResult:
    """
    One component per repeat-group entry.
    The level-1 label comes from the last entry (the form's summary group), else site level.
    """
    prefix = f"{path}/{layout.component_group}"
    scopes = [FieldScope(entry, prefix) for entry in entries if isinstance(entry, Mapping)]
    if len(scopes) != len(entries):
        logger.debug("Skipped %d non-mapping land-cover entries under %s", len(entries) - len(scopes), path)

    level1 = scopes[-1].text(layout.level1_field) if scopes else ""
    if not level1:
        level1 = first_text(data, layout.site_level1_fields)

    components = []
    for scope in scopes:
        kind = scope.text(layout.kind_field)
        components.append(
            LandCoverComponent(
                classification=kind,
                percentage=parse_number(scope.get(layout.cover_field)),
                details=build_details(scope, layout.checklist, kind, layout.crop),
            )
        )
    return LandCoverResult(mode="array", level1=level1, components=components)


def assemble_flat(data: Any, layout: FlatLayout) -> LandCoverResult:
    """Dominant component by landcover kind, then flagged secondary/third vegetation."""
    base = FieldScope(data, layout.base)
    level1 = base.text(layout.level1_field)
    components: list[LandCoverComponent] = []

    dominant = base.scoped(layout.dominant_group)
    kind = dominant.text(layout.kind_field)
    if kind:
        kind_layout = layout.kinds.get(kind, layout.fallback)
        scope = dominant.scoped(kind_layout.group)
        components.append(
            LandCoverComponent(
                classification=kind,
                percentage=resolve_cover(scope, kind_layout.cover),
                details=build_details(scope, kind_layout.checklist, kind, kind_layout.crop),
            )
        )

    for extra in layout.extras:
        scope = base.scoped(extra.group)
        if scope.text(extra.flag_field) != "yes":
            continue
        veg_type = scope.text(extra.type_field) or extra.type_default
        components.append(
            LandCoverComponent(
                classification=extra.classification,
                percentage=resolve_cover(scope, extra.cover),
                details=f"{extra.label} veg_type: {veg_type}",
            )
        )
    return LandCoverResult(mode="flat", level1=level1, components=components)


def assemble_landcover(data: Any, profile: CountryProfile) -> LandCoverResult:
    """Pick the structural mode for this submission and assemble its components."""
    if profile.array is not None:
        found = find_repeat_group(data, profile.array)
        if found is not None:
            path, entries = found
            return assemble_array(data, profile.array, path, entries)
    if profile.flat is not None:
        return assemble_flat(data, profile.flat)
    return LandCoverResult()
