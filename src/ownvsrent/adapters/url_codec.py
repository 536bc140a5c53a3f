# src/ownvsrent/adapters/url_codec.py
"""
Compact query-string encoding of a parameter set, for shareable links.

Keys use short codes (home_price -> "hp"); only values that differ from the
supplied defaults are written. Values are written with repr() so they read back
as the same float.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit

from ownvsrent.domain.parameters import ScenarioParameters, canonical_field, to_number

SHORT_CODES: dict[str, str] = {
    "home_price": "hp",
    "down_payment": "dp",
    "mortgage_rate": "mr",
    "loan_term": "lt",
    "property_tax_rate": "pt",
    "home_insurance": "hi",
    "maintenance_cost": "mc",
    "hoa_fees": "hoa",
    "home_appreciation_rate": "har",
    "rental_income": "ri",
    "monthly_rent": "rent",
    "rent_increase_rate": "rir",
    "investment_start_balance": "isb",
    "monthly_budget": "mb",
    "investment_return": "ir",
    "time_horizon": "th",
}

_FIELD_BY_CODE = {code: name for name, code in SHORT_CODES.items()}


def _normalize_keys(params: Mapping[str, Any] | ScenarioParameters | None) -> dict[str, Any]:
    if isinstance(params, ScenarioParameters):
        return params.model_dump()
    out: dict[str, Any] = {}
    for key, val in (params or {}).items():
        name = canonical_field(str(key))
        if name is not None:
            out[name] = val
    return out


def _format_value(v: float) -> str:
    if v.is_integer():
        return str(int(v))
    return repr(v)


def encode_query(
    params: Mapping[str, Any] | ScenarioParameters,
    defaults: Mapping[str, Any] | None = None,
) -> str:
    values = _normalize_keys(params)
    base = _normalize_keys(defaults)

    pairs: list[tuple[str, str]] = []
    for name, code in SHORT_CODES.items():
        if values.get(name) is None:
            continue
        v = to_number(values[name], default=float("nan"))
        if math.isnan(v):
            continue
        if name in base and to_number(base[name], default=float("nan")) == v:
            continue
        pairs.append((code, _format_value(v)))
    return urlencode(pairs)


def decode_query(query: str) -> dict[str, float]:
    """
    Parse a query string (leading "?" or a full URL both fine) back into
    field -> float. Unknown codes and non-numeric values are skipped.
    """
    if "://" in query:
        query = urlsplit(query).query
    query = query.lstrip("?")

    out: dict[str, float] = {}
    for code, raw in parse_qsl(query, keep_blank_values=False):
        name = _FIELD_BY_CODE.get(code)
        if name is None:
            continue
        v = to_number(raw, default=float("nan"))
        if math.isnan(v):
            continue
        out[name] = v
    return out


def build_share_url(
    params: Mapping[str, Any] | ScenarioParameters,
    base_url: str,
    defaults: Mapping[str, Any] | None = None,
) -> str:
    base = base_url.split("?", 1)[0]
    query = encode_query(params, defaults)
    return f"{base}?{query}" if query else base
