"""Merge of resolved submission parts into the flat output row."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from landcover_pipeline.countries.layout import DIRECTIONS
from landcover_pipeline.models.record import PENDING, FlatOutputRecord, LandCoverComponent
from landcover_pipeline.transform.attachments import PhotoFields
from landcover_pipeline.transform.extractor import SiteFields
from landcover_pipeline.transform.landcover import LandCoverResult
from landcover_pipeline.transform.parsers import Number, as_number

logger = logging.getLogger(__name__)

# Positional comp{n}_* columns in the sheet. Components past this are dropped from the
# row (still counted in component_count and total_percentage) until the sheet grows.
COMPONENT_SLOTS = 4


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a `Z` suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def total_percentage(components: list[LandCoverComponent]) -> Number:
    """Sum of component percentages; overlapping cover means this can exceed 100."""
    return as_number(float(sum(c.percentage for c in components)))


def component_columns(components: list[LandCoverComponent]) -> dict[str, Any]:
    """comp1..comp4 triples; empty slots and 0% components leave the percentage blank."""
    columns: dict[str, Any] = {}
    for slot in range(COMPONENT_SLOTS):
        n = slot + 1
        if slot < len(components):
            comp = components[slot]
            columns[f"comp{n}_classification"] = comp.classification
            columns[f"comp{n}_percentage"] = comp.percentage or ""
            columns[f"comp{n}_details"] = comp.details
        else:
            columns[f"comp{n}_classification"] = ""
            columns[f"comp{n}_percentage"] = ""
            columns[f"comp{n}_details"] = ""
    return columns


def assemble_record(
    country_code: str,
    site: SiteFields,
    landcover: LandCoverResult,
    photos: PhotoFields,
    *,
    workflow_date: Optional[str] = None,
) -> FlatOutputRecord:
    """Build the flat row, with validation-workflow fields in their pending state."""
    components = landcover.components
    if len(components) > COMPONENT_SLOTS:
        logger.warning(
            "Submission %s has %d land-cover components; only the first %d fit the sheet",
            site.uuid or "<no uuid>",
            len(components),
            COMPONENT_SLOTS,
        )
    classes = [landcover.level1] if landcover.level1 else []

    return FlatOutputRecord(
        uuid=site.uuid,
        country_code=country_code,
        site_id=site.site_id,
        psu_id=site.psu_id,
        province=site.province,
        surveyor=site.surveyor,
        survey_date=site.survey_date,
        submission_time=site.submission_time,
        latitude=site.latitude,
        longitude=site.longitude,
        elevation=site.elevation,
        landform=site.landform,
        land_cover_types=landcover.level1,
        unique_classifications=", ".join(classes),
        classification_count=len(classes),
        total_percentage=total_percentage(components),
        component_count=len(components),
        **component_columns(components),
        **{f"download_url_{d}": photos.urls.get(d, "") for d in DIRECTIONS},
        **{f"filename_{d}": photos.filenames.get(d, "") for d in DIRECTIONS},
        comments=site.comments,
        surveyor_comments=site.surveyor_comments,
        validation_status=PENDING,
        is_correct="",
        final_classification="",
        main_crop_type="",
        validator_comments="",
        validator_name="",
        validation_date="",
        workflow_date=workflow_date if workflow_date is not None else utc_timestamp(),
    )
