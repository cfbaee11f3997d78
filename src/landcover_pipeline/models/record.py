"""Normalized land-cover component and flat output row models."""

from typing import Union

from pydantic import BaseModel, Field

Percentage = Union[int, float]

PENDING = "PENDING"


class LandCoverComponent(BaseModel):
    """One sub-area's classification with its coverage and descriptive detail."""

    classification: str = ""
    percentage: Percentage = 0
    details: str = Field(default="", description="Pipe-delimited 'key: value' pairs")


class FlatOutputRecord(BaseModel):
    """
    Country-agnostic row appended to the validation sheet.
    Field declaration order is the column order.
    """

    uuid: str = ""
    country_code: str = ""
    site_id: str = ""
    psu_id: str = ""
    province: str = ""
    surveyor: str = ""
    survey_date: str = ""
    submission_time: str = ""
    latitude: Union[str, float] = ""
    longitude: Union[str, float] = ""
    elevation: Union[str, float] = ""
    landform: str = ""

    land_cover_types: str = ""
    unique_classifications: str = ""
    classification_count: int = 0
    total_percentage: Percentage = 0
    component_count: int = 0

    comp1_classification: str = ""
    comp1_percentage: Union[Percentage, str] = ""
    comp1_details: str = ""
    comp2_classification: str = ""
    comp2_percentage: Union[Percentage, str] = ""
    comp2_details: str = ""
    comp3_classification: str = ""
    comp3_percentage: Union[Percentage, str] = ""
    comp3_details: str = ""
    comp4_classification: str = ""
    comp4_percentage: Union[Percentage, str] = ""
    comp4_details: str = ""

    download_url_north: str = ""
    download_url_east: str = ""
    download_url_south: str = ""
    download_url_west: str = ""
    filename_north: str = ""
    filename_east: str = ""
    filename_south: str = ""
    filename_west: str = ""

    comments: str = ""
    surveyor_comments: str = ""

    validation_status: str = PENDING
    is_correct: str = ""
    final_classification: str = ""
    main_crop_type: str = ""
    validator_comments: str = ""
    validator_name: str = ""
    validation_date: str = ""
    workflow_date: str = ""

    @classmethod
    def columns(cls) -> list[str]:
        """Column names in sheet order."""
        return list(cls.model_fields)

    def to_row(self) -> list:
        """Values in sheet column order."""
        data = self.model_dump()
        return [data[name] for name in self.columns()]
