"""Direction photo resolution: attachment download URLs and storage filenames."""

from dataclasses import dataclass, field
from typing import Any

from landcover_pipeline.countries.layout import DIRECTIONS, PhotoLayout
from landcover_pipeline.models.raw import Attachment
from landcover_pipeline.transform.parsers import image_name, strip_format_query
from landcover_pipeline.transform.paths import is_blank, lookup


@dataclass
class PhotoFields:
    """Per-direction download URLs and normalized filenames (empty when absent)."""

    group: str = ""
    urls: dict[str, str] = field(default_factory=dict)
    filenames: dict[str, str] = field(default_factory=dict)


def select_photo_group(data: Any, layout: PhotoLayout) -> tuple[str, dict[str, Any]]:
    """
    First candidate group with any direction answered, with its answers.
    When none is answered the last candidate is used so URL lookups still target it.
    """
    group, answers = "", {}
    for group in layout.groups:
        answers = {d: lookup(data, layout.photo_path(group, d)) for d in DIRECTIONS}
        if any(not is_blank(v) for v in answers.values()):
            break
    return group, answers


def resolve_download_url(attachments: list[Attachment], xpath: str) -> str:
    """Download URL of the attachment answering `xpath`, without the `?format=json` suffix."""
    for attachment in attachments:
        if attachment.question_xpath and attachment.question_xpath == xpath:
            return strip_format_query(attachment.download_url)
    return ""


def resolve_photos(
    data: Any,
    attachments: list[Attachment],
    layout: PhotoLayout,
    identifier: str,
) -> PhotoFields:
    """
    URLs and filenames are resolved independently: a URL can exist without a filename
    answer and vice versa.
    """
    group, answers = select_photo_group(data, layout)
    photos = PhotoFields(group=group)
    for direction in DIRECTIONS:
        xpath = layout.photo_path(group, direction) if group else ""
        photos.urls[direction] = resolve_download_url(attachments, xpath) if xpath else ""
        photos.filenames[direction] = image_name(identifier, direction, answers.get(direction))
    return photos
