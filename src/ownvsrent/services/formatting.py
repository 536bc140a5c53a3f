from typing import Any

from ownvsrent.domain.parameters import to_number

# smallest first; a value that rounds up to 1000 moves on to the next unit
_COMPACT_UNITS = [(1e3, "K"), (1e6, "M"), (1e9, "B"), (1e12, "T")]


def _round_half_up(x: float) -> int:
    return int(x + 0.5)


def format_currency(value: Any, compact: bool = False) -> str:
    """
    US dollars, no cents: 1234.5 -> "$1,235", -50 -> "-$50".

    compact=True shortens |value| >= 1000: "$12K", "$1M", "$3B".
    None / NaN / inf / garbage render as "$0".
    """
    v = to_number(value)
    a = abs(v)

    if compact and a >= 1000:
        for i, (threshold, suffix) in enumerate(_COMPACT_UNITS):
            scaled = _round_half_up(a / threshold)
            is_last = i == len(_COMPACT_UNITS) - 1
            if scaled < 1000 or is_last:
                sign = "-" if v < 0 else ""
                return f"{sign}${scaled:,}{suffix}"

    rounded = _round_half_up(a)
    sign = "-" if v < 0 and rounded else ""
    return f"{sign}${rounded:,}"


def format_percentage(value: Any, decimals: int = 1) -> str:
    v = to_number(value)
    d = max(0, min(int(to_number(decimals, 1)), 20))
    return f"{v:.{d}f}%"
