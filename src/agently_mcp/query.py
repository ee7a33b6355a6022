
from typing import Any, List, Optional, Tuple
from urllib.parse import quote

from .schema import AgentQuery

# Fields that describe the request but are not filters the API understands.
ADVISORY_FIELDS = frozenset({"explanation"})
ALWAYS_SENT = ("page", "limit")


def _serialize(value: Any) -> Optional[str]:
    """Renders a validated value as a query value, or None when it should be omitted."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        # Joined in caller order; the API reads multiple values as an AND filter.
        return ",".join(value) if value else None
    if isinstance(value, str):
        return value or None
    return str(value)


def query_pairs(query: AgentQuery) -> List[Tuple[str, str]]:
    """Ordered (key, value) pairs for every field present on the query."""
    pairs = [(name, str(getattr(query, name))) for name in ALWAYS_SENT]

    for name, info in AgentQuery.model_fields.items():
        if name in ALWAYS_SENT or name in ADVISORY_FIELDS:
            continue
        value = _serialize(getattr(query, name))
        if value is not None:
            pairs.append((info.alias or name, value))

    return pairs


def build_query_string(query: AgentQuery) -> str:
    """
    Serializes a validated query into the canonical query string.

    Values are percent-encoded and encoded spaces are then written as '+',
    the only space encoding the Agently API recognizes. A literal '%20' in a
    value is itself escaped ('%2520') so the substitution never touches it.
    """
    encoded = "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in query_pairs(query))
    return encoded.replace("%20", "+")
