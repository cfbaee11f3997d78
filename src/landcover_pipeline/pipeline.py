"""Pipeline orchestration: payload → normalized rows → optional store."""

import logging
from typing import Any, Optional

from landcover_pipeline.countries.registry import CountryRegistry
from landcover_pipeline.models.record import FlatOutputRecord
from landcover_pipeline.store import RecordStore
from landcover_pipeline.transform.transformer import Clock

logger = logging.getLogger(__name__)


def run_transform(
    payload: Any,
    country: str,
    *,
    store: Optional[RecordStore] = None,
    clock: Optional[Clock] = None,
) -> list[FlatOutputRecord]:
    """
    Transform one ingestion payload for a country.
    When a store is given the rows are appended and the run is recorded.
    """
    transformer = CountryRegistry.get(country, clock=clock)
    records = transformer.transform_many(payload)

    if store is not None:
        run = store.start_run(transformer.country_code)
        appended, skipped = store.append(records)
        store.finish_run(
            run.id,
            items_received=len(records),
            items_appended=appended,
            items_skipped=skipped,
        )
        logger.info(
            "Stored %s run %d: %d appended, %d already present",
            transformer.country_code,
            run.id,
            appended,
            skipped,
        )
    return records
