
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from .config import Settings
from .exceptions import AgentlyShapeError, AgentlyStatusError, AgentlyTransportError

logger = logging.getLogger(__name__)


class CatalogResponse(BaseModel):
    """Body of a successful catalog search. Record contents are opaque and untrusted."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    found_agents: List[Any]
    pagination: Dict[str, Any]


class AgentlyClient:
    """Client for the Agently agents API."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.endpoint = settings.agents_endpoint
        self.headers = {"Accept": "application/json"}
        if settings.api_key is not None:
            self.headers["Authorization"] = f"Bearer {settings.api_key.get_secret_value()}"
        self._timeout = settings.http_timeout
        self._transport = transport

    def _build_client(self) -> httpx.AsyncClient:
        options: Dict[str, Any] = {"headers": self.headers}
        if self._timeout is not None:
            options["timeout"] = self._timeout
        if self._transport is not None:
            options["transport"] = self._transport
        return httpx.AsyncClient(**options)

    async def fetch_agents(self, query_string: str) -> CatalogResponse:
        """
        Searches the public agent catalog.

        Args:
            query_string: Canonical, already encoded query string (without '?').

        Returns:
            CatalogResponse: The found agents and the opaque pagination block.

        Raises:
            AgentlyTransportError: If the API cannot be reached.
            AgentlyStatusError: If the API answers with a non-success status.
            AgentlyShapeError: If the body is not the expected JSON object.
        """
        url = f"{self.endpoint}?{query_string}"
        logger.debug("GET %s", url)

        try:
            async with self._build_client() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            message = str(e) or type(e).__name__
            logger.warning("Agently API unreachable: %s", message)
            raise AgentlyTransportError(f"Failed to call Agently API: {message}") from e

        if not response.is_success:
            logger.warning("Agently API error %s: %s", response.status_code, response.text)
            raise AgentlyStatusError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Agently API returned a non-JSON body")
            raise AgentlyShapeError("Received unexpected format from Agently API: body is not JSON") from e

        if not isinstance(payload, dict):
            logger.warning("Unexpected Agently API response format: %r", payload)
            raise AgentlyShapeError("Received unexpected format from Agently API: body is not an object")

        try:
            return CatalogResponse.model_validate(payload)
        except ValidationError as e:
            logger.warning("Unexpected Agently API response format: %s", e)
            raise AgentlyShapeError(
                "Received unexpected format from Agently API: expected 'found_agents' and 'pagination'"
            ) from e
