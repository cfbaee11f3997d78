"""Unit tests for RecordStore and CSV export."""

import csv
from pathlib import Path

import pytest

from landcover_pipeline.models.record import PENDING, FlatOutputRecord
from landcover_pipeline.store import RecordStore, write_csv
from landcover_pipeline.validation import CORRECTED, VALIDATED, apply_verdict


def _make_record(
    uuid: str = "uuid:1",
    country_code: str = "GTM",
    land_cover_types: str = "cropland",
    comp1_percentage: int | float | str = 60,
) -> FlatOutputRecord:
    return FlatOutputRecord(
        uuid=uuid,
        country_code=country_code,
        site_id="GT0101-01",
        psu_id="GT0101",
        latitude="15.47",
        longitude=-90.2,
        land_cover_types=land_cover_types,
        unique_classifications=land_cover_types,
        classification_count=1,
        total_percentage=comp1_percentage or 0,
        component_count=1,
        comp1_classification="vegetated",
        comp1_percentage=comp1_percentage,
        workflow_date="2026-03-01T12:30:00.123Z",
    )


@pytest.fixture
def store(tmp_path: Path) -> RecordStore:
    """RecordStore with temporary database."""
    return RecordStore(tmp_path / "records.db")


class TestRecordStoreAppend:
    """Tests for append."""

    def test_append_returns_counts(self, store: RecordStore) -> None:
        """Fresh rows are appended in order."""
        appended, skipped = store.append([_make_record("a"), _make_record("b")])
        assert (appended, skipped) == (2, 0)
        assert [r.record.uuid for r in store.get_all()] == ["a", "b"]

    def test_duplicate_uuid_skipped(self, store: RecordStore) -> None:
        """Re-appending a submission does not create a second row."""
        store.append([_make_record("a")])
        appended, skipped = store.append([_make_record("a"), _make_record("c")])
        assert (appended, skipped) == (1, 1)
        assert len(store.get_all()) == 2

    def test_rows_without_uuid_always_appended(self, store: RecordStore) -> None:
        store.append([_make_record(""), _make_record("")])
        assert len(store.get_all()) == 2

    def test_values_survive_round_trip(self, store: RecordStore) -> None:
        """Coordinate and percentage types are preserved."""
        store.append([_make_record("a", comp1_percentage=12.5)])
        stored = store.get_all()[0]
        assert stored.row_id == 1
        assert stored.record.latitude == "15.47"
        assert stored.record.longitude == -90.2
        assert stored.record.comp1_percentage == 12.5
        assert stored.record.comp2_percentage == ""
        assert stored.record.validation_status == PENDING


class TestRecordStoreQueries:
    """Tests for lookups."""

    def test_get_by_country(self, store: RecordStore) -> None:
        store.append([_make_record("a", "GTM"), _make_record("b", "TUN")])
        assert [r.record.uuid for r in store.get_by_country("tun")] == ["b"]

    def test_get_row_missing(self, store: RecordStore) -> None:
        assert store.get_row(42) is None

    def test_find_by_uuid(self, store: RecordStore) -> None:
        store.append([_make_record("a"), _make_record("b")])
        found = store.find_by_uuid("b")
        assert found is not None
        assert found.row_id == 2
        assert store.find_by_uuid("zzz") is None


class TestRecordStoreValidation:
    """Tests for update_validation."""

    def test_correct_verdict(self, store: RecordStore) -> None:
        """Verdict values land in the workflow columns; other columns are untouched."""
        store.append([_make_record("a")])
        update = apply_verdict("correct", land_cover_types="cropland", validator_name="Maria")
        record = store.update_validation(1, update)
        assert record is not None
        assert record.validation_status == VALIDATED
        assert record.final_classification == "cropland"
        assert record.comp1_percentage == 60

        reloaded = store.get_row(1).record
        assert reloaded.validation_status == VALIDATED
        assert reloaded.is_correct == "YES"
        assert reloaded.validator_name == "Maria"
        assert reloaded.workflow_date == "2026-03-01T12:30:00.123Z"

    def test_status_query_reflects_update(self, store: RecordStore) -> None:
        store.append([_make_record("a"), _make_record("b")])
        update = apply_verdict(
            "incorrect", land_cover_types="cropland", validator_name="Maria", corrected_classification="forest"
        )
        store.update_validation(2, update)
        assert [r.record.uuid for r in store.get_by_status(CORRECTED)] == ["b"]
        assert [r.record.uuid for r in store.get_by_status(PENDING)] == ["a"]

    def test_corrected_classification_not_a_column(self, store: RecordStore) -> None:
        """The correction only reaches the row through final_classification."""
        store.append([_make_record("a")])
        update = apply_verdict(
            "incorrect", land_cover_types="cropland", validator_name="Maria", corrected_classification="forest"
        )
        record = store.update_validation(1, update)
        assert record.final_classification == "forest"
        assert "corrected_classification" not in record.model_dump()

    def test_missing_row(self, store: RecordStore) -> None:
        update = apply_verdict("unclear", land_cover_types="", validator_name="Maria")
        assert store.update_validation(99, update) is None


class TestRecordStoreRuns:
    """Tests for run tracking."""

    def test_run_lifecycle(self, store: RecordStore) -> None:
        run = store.start_run("GTM")
        assert run.status == "running"
        store.finish_run(run.id, items_received=3, items_appended=2, items_skipped=1)
        finished = store.get_run(run.id)
        assert finished.status == "completed"
        assert finished.finished_at is not None
        assert (finished.items_received, finished.items_appended, finished.items_skipped) == (3, 2, 1)

    def test_get_run_missing(self, store: RecordStore) -> None:
        assert store.get_run(7) is None


def test_write_csv(tmp_path: Path) -> None:
    """CSV has the sheet header and one line per row."""
    path = tmp_path / "rows.csv"
    count = write_csv([_make_record("a"), _make_record("b", comp1_percentage="")], path)
    assert count == 2
    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == FlatOutputRecord.columns()
    assert rows[1][0] == "a"
    assert rows[1][rows[0].index("comp1_percentage")] == "60"
    assert rows[2][rows[0].index("comp1_percentage")] == ""
