"""Data models for raw submissions and normalized land-cover rows."""

from landcover_pipeline.models.raw import Attachment, RawSurveyRecord
from landcover_pipeline.models.record import FlatOutputRecord, LandCoverComponent

__all__ = ["Attachment", "FlatOutputRecord", "LandCoverComponent", "RawSurveyRecord"]
