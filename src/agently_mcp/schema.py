
from dataclasses import dataclass
from typing import Annotated, Any, List, Literal, Mapping, Optional, Tuple

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .categories import CATEGORY_SET
from .exceptions import AgentlyValidationError

MAX_LIMIT = 50
MAX_SEARCH_TERM_LENGTH = 250
MAX_FILTER_ITEMS = 20

# Spellings of `isLocal` that count as true. Anything else given as a string
# is rejected rather than read as false.
TRUTHY_STRINGS = frozenset({"true", "1", ""})

Alphabetical = Literal["a-z", "z-a"]
Chronological = Literal["newest", "oldest"]
Ranking = Literal["highest", "lowest"]


def _split_comma_separated(value: Any) -> Any:
    """Accepts 'a,b' as shorthand for ['a', 'b']; blank items are dropped from either form."""
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, list):
        # Non-strings are left for item validation to reject
        return [item.strip() if isinstance(item, str) else item
                for item in value if not (isinstance(item, str) and not item.strip())]
    return value


def _known_categories(values: List[str]) -> List[str]:
    unknown = [v for v in values if v not in CATEGORY_SET]
    if unknown:
        raise ValueError(f"unknown categor{'y' if len(unknown) == 1 else 'ies'}: {', '.join(repr(u) for u in unknown)}")
    return values


def _tolerant_bool(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value.lower() in TRUTHY_STRINGS:
            return True
        raise ValueError(f"expected a boolean, 'true', '1' or an empty string, got {value!r}")
    raise ValueError(f"expected a boolean, got {type(value).__name__}")


FilterList = Annotated[
    List[str],
    Field(max_length=MAX_FILTER_ITEMS),
    BeforeValidator(_split_comma_separated),
]
CategoryList = Annotated[FilterList, AfterValidator(_known_categories)]
TolerantBool = Annotated[bool, BeforeValidator(_tolerant_bool)]


class AgentQuery(BaseModel):
    """
    Validated arguments of the `fetch_agents` tool.

    Attributes are snake_case; the camelCase aliases are the names used by
    callers and by the Agently API.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=MAX_LIMIT)
    search_term: Optional[str] = Field(default=None, max_length=MAX_SEARCH_TERM_LENGTH)
    categories: Optional[CategoryList] = None
    input_modes: Optional[FilterList] = None
    output_modes: Optional[FilterList] = None
    skill_tags: Optional[FilterList] = None
    sort_by_name: Optional[Alphabetical] = None
    sort_by_created_at: Optional[Chronological] = None
    sort_by_updated_at: Optional[Chronological] = None
    sort_by_success_rate: Optional[Ranking] = None
    sort_by_usage: Optional[Ranking] = None
    sort_by_request_price: Optional[Ranking] = None
    sort_by_streaming_price: Optional[Ranking] = None
    is_local: Optional[TolerantBool] = None
    # Advisory only, never sent to the API
    explanation: Optional[str] = None


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


@dataclass(frozen=True)
class QueryParseResult:
    """Either a validated query or the list of everything wrong with the input."""
    query: Optional[AgentQuery] = None
    violations: Tuple[FieldViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return self.query is not None

    def unwrap(self) -> AgentQuery:
        if self.query is None:
            raise AgentlyValidationError(self.violations)
        return self.query


def _violations_from(error: ValidationError) -> Tuple[FieldViolation, ...]:
    violations = []
    for detail in error.errors():
        loc = ".".join(str(part) for part in detail["loc"]) or "arguments"
        violations.append(FieldViolation(field=loc, message=detail["msg"]))
    return tuple(violations)


def parse_agent_query(arguments: Optional[Mapping[str, Any]]) -> QueryParseResult:
    """
    Validates a raw tool argument bag.

    Never raises: failures come back as field violations so that no partially
    validated query is ever handed to later stages.

    Args:
        arguments: The arguments object of the tool call. None means no arguments.

    Returns:
        QueryParseResult: Holding either the AgentQuery or its violations.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        return QueryParseResult(violations=(
            FieldViolation("arguments", f"expected an object, got {type(arguments).__name__}"),
        ))

    try:
        return QueryParseResult(query=AgentQuery.model_validate(dict(arguments)))
    except ValidationError as e:
        return QueryParseResult(violations=_violations_from(e))
