"""Survey platform sources."""

from landcover_pipeline.sources.kobo import KoboClient

__all__ = ["KoboClient"]
