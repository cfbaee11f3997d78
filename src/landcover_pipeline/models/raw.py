"""Raw survey submission before normalization."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Attachment(BaseModel):
    """Stored binary answering one question of a submission."""

    model_config = ConfigDict(extra="allow")

    question_xpath: str = ""
    download_url: str = ""


class RawSurveyRecord(BaseModel):
    """
    Flexible raw submission from the data-collection tool.
    Keys are slash-delimited field paths; `_`-prefixed keys carry ingestion metadata.
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] = Field(default_factory=dict)

    def attachments(self) -> list[Attachment]:
        """Parsed `_attachments` entries; malformed entries are skipped."""
        entries = self.data.get("_attachments")
        if not isinstance(entries, list):
            return []
        parsed: list[Attachment] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            try:
                parsed.append(Attachment.model_validate(entry))
            except ValidationError:
                continue
        return parsed
