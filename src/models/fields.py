"""Strict field readers for raw JSON records."""


def require_int(data: dict, key: str) -> int:
    """Return data[key] if it is a JSON integer (bools and floats rejected)."""
    value = data[key]
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{key!r} must be an integer, got {value!r}")
    return value


def require_str(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {value!r}")
    return value
