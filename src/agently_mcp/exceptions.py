
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .schema import FieldViolation


class AgentlyError(Exception):
    """Base exception for the Agently MCP server."""
    pass


class AgentlyValidationError(AgentlyError):
    """Raised when tool arguments fail schema validation."""

    def __init__(self, violations: Sequence["FieldViolation"]):
        self.violations = tuple(violations)
        details = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(f"Invalid input parameters: {details}")


class AgentlyTransportError(AgentlyError):
    """Raised when the Agently API cannot be reached."""
    pass


class AgentlyStatusError(AgentlyError):
    """Raised when the Agently API answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Agently API request failed with status {status_code}: {body}")


class AgentlyShapeError(AgentlyError):
    """Raised when the Agently API response does not have the expected shape."""
    pass


class UnknownToolError(AgentlyError):
    """Raised when a tool call names a tool this server does not expose."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
