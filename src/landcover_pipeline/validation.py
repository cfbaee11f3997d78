"""Reviewer verdicts mapped onto the validation-workflow columns."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from landcover_pipeline.models.record import PENDING
from landcover_pipeline.transform.assembler import utc_timestamp

VALIDATED = "VALIDATED"
CORRECTED = "CORRECTED"
NEEDS_REVIEW = "NEEDS_REVIEW"

STATUSES = (PENDING, VALIDATED, CORRECTED, NEEDS_REVIEW)
REVIEWED_STATUSES = (VALIDATED, CORRECTED, NEEDS_REVIEW)

VERDICTS = ("correct", "incorrect", "unclear")


class VerdictError(ValueError):
    """A verdict cannot be applied to a row as submitted."""


class ValidationUpdate(BaseModel):
    """New values for the validation-workflow columns of one row."""

    validation_status: str
    is_correct: str
    final_classification: str = ""
    main_crop_type: str = ""
    corrected_classification: str = ""
    validator_comments: str = ""
    validator_name: str
    validation_date: str


def apply_verdict(
    verdict: str,
    *,
    land_cover_types: str,
    validator_name: str,
    corrected_classification: str = "",
    main_crop_type: str = "",
    comments: str = "",
    now: Optional[datetime] = None,
) -> ValidationUpdate:
    """
    Map a reviewer verdict to workflow values.

    correct   -> VALIDATED, final classification is the surveyed level-1 class
    incorrect -> CORRECTED, final classification is the reviewer's correction
    unclear   -> NEEDS_REVIEW, no final classification
    """
    verdict = (verdict or "").strip().lower()
    if not validator_name or not validator_name.strip():
        raise VerdictError("Validator name is required")

    if verdict == "correct":
        if not land_cover_types:
            raise VerdictError("Cannot validate as correct: row has no land-cover classification")
        status, is_correct, final = VALIDATED, "YES", land_cover_types
    elif verdict == "incorrect":
        if not corrected_classification:
            raise VerdictError("Corrected classification is required when marking as incorrect")
        status, is_correct, final = CORRECTED, "NO", corrected_classification
    elif verdict == "unclear":
        status, is_correct, final = NEEDS_REVIEW, "UNCLEAR", ""
    else:
        raise VerdictError(f"Unknown verdict: {verdict!r}. Expected one of {list(VERDICTS)}")

    return ValidationUpdate(
        validation_status=status,
        is_correct=is_correct,
        final_classification=final,
        main_crop_type=main_crop_type or "",
        corrected_classification=corrected_classification or "",
        validator_comments=comments or "",
        validator_name=validator_name.strip(),
        validation_date=utc_timestamp(now),
    )
