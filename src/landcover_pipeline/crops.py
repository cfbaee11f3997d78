"""Per-country crop vocabulary used by reviewers when correcting a classification."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CropVocabulary = dict[str, list[str]]


def load_crops(path: str | Path) -> CropVocabulary:
    """
    Load newline-delimited JSON entries of the form {"Country": "GTM", "crops": [...]}.
    Blank and malformed lines are skipped; a missing file yields an empty vocabulary.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Crop vocabulary not found: %s", path)
        return {}

    vocabulary: CropVocabulary = {}
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        if not line.strip():
            continue
        try:
            entry = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning("Skipping malformed crop line %d in %s: %s", lineno, path, e)
            continue
        country = entry.get("Country") if isinstance(entry, dict) else None
        crops = entry.get("crops") if isinstance(entry, dict) else None
        if not country or not isinstance(crops, list):
            logger.warning("Skipping crop line %d in %s: expected Country and crops", lineno, path)
            continue
        vocabulary[str(country).upper()] = [str(c) for c in crops]
    logger.debug("Crop vocabulary loaded for %s", sorted(vocabulary))
    return vocabulary


def crops_for(vocabulary: CropVocabulary, country_code: str) -> list[str]:
    """Crop choices for a country; empty for unknown countries."""
    return list(vocabulary.get((country_code or "").upper(), []))
