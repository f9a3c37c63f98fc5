from collections.abc import Mapping, Sequence
from typing import Any


def get_item(data: Any, path: Any, default: Any = None) -> Any:
    """Walk ``data`` along ``path`` and return the value found, or ``default``.

    ``path`` is either a single key or a list/tuple of keys. Mappings are
    looked up by key and lists/tuples by integer index. Any missing step, or a
    step into something that is not a container, yields ``default``.
    """
    keys = path if isinstance(path, (list, tuple)) else [path]
    current = data

    for key in keys:
        if isinstance(current, Mapping):
            if key not in current:
                return default
            current = current[key]
        elif (
            isinstance(current, Sequence)
            and not isinstance(current, (str, bytes))
            and isinstance(key, int)
            and not isinstance(key, bool)
            and -len(current) <= key < len(current)
        ):
            current = current[key]
        else:
            return default

    return current


def to_float(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def to_text(value: Any, default: Any = None) -> Any:
    # Only strings and numbers make sense as a single query value
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return default
    return value


def format_number(value: float) -> str:
    # 14 significant digits without a trailing ".0", e.g. 12.0 -> "12" and 1e20 -> "1.0E+20"
    text = f"{value:.14G}"
    if "E" not in text:
        return text

    mantissa, exponent = text.split("E")
    if "." not in mantissa:
        mantissa += ".0"
    return f"{mantissa}E{int(exponent):+d}"
