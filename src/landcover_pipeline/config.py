"""Pipeline settings loaded from YAML."""

import os
from pathlib import Path
from typing import Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for settings loading. Run: pip install -e ."
    ) from e
from pydantic import BaseModel, Field

TOKEN_ENV_VAR = "KOBO_TOKEN"


class PipelineSettings(BaseModel):
    """Where submissions come from and where normalized rows go."""

    country: Optional[str] = Field(default=None, description="Default country code, e.g. GTM")

    kobo_url: str = Field(default="https://kf.kobotoolbox.org", description="Survey platform base URL")
    kobo_token: Optional[str] = None
    asset_uid: Optional[str] = Field(default=None, description="Form (asset) to pull submissions from")
    page_size: int = 1000

    db_path: Path = Path("landcover.db")
    crops_path: Path = Path("crops.json")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PipelineSettings":
        """Load settings from YAML. Supports nested (kobo/store) or flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        flat: dict = {}
        kobo = data.get("kobo", {}) or {}
        store = data.get("store", {}) or {}

        def _get(key: str, nested: dict, top: dict, default=None):
            return nested.get(key, top.get(key, default))

        flat["country"] = data.get("country")
        flat["kobo_url"] = kobo.get("url") or data.get("kobo_url")
        flat["kobo_token"] = kobo.get("token") or data.get("kobo_token")
        flat["asset_uid"] = _get("asset_uid", kobo, data)
        flat["page_size"] = _get("page_size", kobo, data)
        flat["db_path"] = _get("db_path", store, data)
        flat["crops_path"] = _get("crops_path", store, data)
        return cls.model_validate({k: v for k, v in flat.items() if v is not None})

    def with_env(self) -> "PipelineSettings":
        """Apply environment overrides (the API token is never required in the file)."""
        token = os.environ.get(TOKEN_ENV_VAR)
        return self.model_copy(update={"kobo_token": token}) if token else self
