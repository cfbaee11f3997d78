"""Country-parametrized transformation of raw submissions into flat rows."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Optional, Union

from landcover_pipeline.countries.layout import CountryProfile
from landcover_pipeline.models.raw import RawSurveyRecord
from landcover_pipeline.models.record import FlatOutputRecord
from landcover_pipeline.transform.assembler import assemble_record, utc_timestamp
from landcover_pipeline.transform.attachments import resolve_photos
from landcover_pipeline.transform.extractor import extract_site_fields
from landcover_pipeline.transform.inputs import normalize_payload
from landcover_pipeline.transform.landcover import assemble_landcover

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SurveyTransformer:
    """
    Transforms submissions of one country's form into `FlatOutputRecord`s.
    Missing or oddly-shaped answers fall back to empty/zero values; nothing raises.
    """

    def __init__(self, profile: CountryProfile, clock: Optional[Clock] = None):
        self.profile = profile
        self._clock = clock or _utc_now

    @property
    def country_code(self) -> str:
        return self.profile.code

    def transform(self, raw: Union[RawSurveyRecord, dict[str, Any]]) -> FlatOutputRecord:
        """Transform one submission."""
        if not isinstance(raw, RawSurveyRecord):
            raw = RawSurveyRecord(data=raw if isinstance(raw, dict) else {})
        data = raw.data

        site = extract_site_fields(data, self.profile)
        landcover = assemble_landcover(data, self.profile)
        photos = resolve_photos(data, raw.attachments(), self.profile.photos, site.uuid)
        logger.debug(
            "%s %s: %s mode, %d components, photos from %s",
            self.country_code,
            site.uuid,
            landcover.mode,
            len(landcover.components),
            photos.group or "-",
        )
        return assemble_record(
            self.country_code,
            site,
            landcover,
            photos,
            workflow_date=utc_timestamp(self._clock()),
        )

    def transform_many(self, payload: Any = None) -> list[FlatOutputRecord]:
        """Transform every submission of an ingestion payload, preserving order."""
        items = normalize_payload(payload)
        records = [self.transform(item) for item in items]
        logger.info("Transformed %d %s submissions", len(records), self.country_code)
        return records
