import json
from typing import Any

BEARER_PREFIX = "bearer "

# Whitespace and line terminators a browser's String.prototype.trim() removes.
# Unlike str.strip() this includes U+FEFF and leaves U+001C..U+001F and U+0085 alone.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")

def decode_json_or_default(raw: bytes | str | None, default: Any) -> Any:
    """Best-effort JSON decode; returns `default` when the input cannot be parsed.

    NaN/Infinity are not JSON and count as a parse failure, as does nesting
    deep enough to exhaust the recursion limit.
    """
    if raw is None:
        return default
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError):
        # json.JSONDecodeError and UnicodeDecodeError are both ValueError
        return default

def coerce_text(value: Any) -> str:
    """Render a decoded JSON value as text the way a browser's String() does."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, list):
        return ",".join(coerce_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)

def trim_text(s: str | None) -> str:
    return (s or "").strip(TRIM_CHARS)

def has_bearer_token(header: str | None) -> bool:
    return (header or "").lower().startswith(BEARER_PREFIX)
