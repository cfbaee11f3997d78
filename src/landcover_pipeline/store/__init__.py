"""Local storage and export for normalized rows."""

from landcover_pipeline.store.csv_export import write_csv
from landcover_pipeline.store.sqlite_store import RecordStore, RunRecord, StoredRecord

__all__ = ["RecordStore", "RunRecord", "StoredRecord", "write_csv"]
