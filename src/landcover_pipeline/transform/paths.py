"""Safe field lookup over raw survey submissions.

Submissions from the data-collection tool are mostly flat mappings whose keys are
full slash-delimited paths (``group/subgroup/field``), but some exports nest groups
as real mappings. ``lookup`` handles both and never raises.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from landcover_pipeline.transform.parsers import as_number


def is_blank(value: Any) -> bool:
    """True for values that count as 'not answered'."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def lookup(data: Any, path: str) -> Optional[Any]:
    """
    Return the value at `path`, or None when absent.
    Tries the full path as a flat key first, then walks nested mappings segment by segment.
    """
    if not isinstance(data, Mapping) or not path:
        return None
    if path in data:
        return data[path]
    node: Any = data
    for segment in path.split("/"):
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node


def first_present(data: Any, paths: Iterable[str]) -> Optional[Any]:
    """First non-blank value among candidate paths, in priority order."""
    for path in paths:
        value = lookup(data, path)
        if not is_blank(value):
            return value
    return None


def text(value: Any) -> str:
    """Render an answer as a string; blank answers become '', 45.0 renders as 45."""
    if is_blank(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true"
    if isinstance(value, float):
        return str(as_number(value))
    return str(value)


def first_text(data: Any, paths: Iterable[str], default: str = "") -> str:
    """First non-blank answer among `paths` as text, else `default`."""
    value = first_present(data, paths)
    return default if value is None else text(value)


def join_path(*parts: str) -> str:
    """Join path segments with '/', ignoring empty parts."""
    return "/".join(p.strip("/") for p in parts if p)


class FieldScope:
    """Lookups relative to one group path inside a submission (or repeat-group entry)."""

    def __init__(self, data: Any, base: str = ""):
        self.data = data
        self.base = base

    def path(self, field: str) -> str:
        return join_path(self.base, field)

    def get(self, field: str) -> Optional[Any]:
        return lookup(self.data, self.path(field))

    def text(self, field: str) -> str:
        return text(self.get(field))

    def scoped(self, group: str) -> "FieldScope":
        """Scope for a sub-group of this one."""
        return FieldScope(self.data, self.path(group))
