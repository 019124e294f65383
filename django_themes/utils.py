from __future__ import annotations

import re
from typing import Any, Mapping

from django.utils.text import camel_case_to_spaces

_MISSING = object()


def data_get(data: Mapping[str, Any] | None, key: str, default: Any = None) -> Any:
    """Look up ``key`` in nested mappings using dot notation.

    ``data_get({"paths": {"themes": "/srv"}}, "paths.themes")`` returns
    ``"/srv"``. ``default`` is returned as soon as a segment is missing or the
    current value is not a mapping.
    """
    if data is None:
        return default
    head, _, rest = key.partition(".")
    if not isinstance(data, Mapping):
        return default
    value = data.get(head, _MISSING)
    if value is _MISSING:
        return default
    if not rest:
        return value
    return data_get(value, rest, default)


def studly(value: str) -> str:
    """``"pricing table"`` / ``"pricing-table"`` / ``"pricingTable"`` -> ``"PricingTable"``."""
    parts = re.split(r"[\s_\-]+", value.strip())
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def kebab(value: str) -> str:
    return "-".join(camel_case_to_spaces(studly(value)).split())


def snake(value: str) -> str:
    return "_".join(camel_case_to_spaces(studly(value)).split())


def headline(value: str) -> str:
    return camel_case_to_spaces(studly(value)).title()
