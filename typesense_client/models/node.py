"""Node descriptor: where the service lives and how to authenticate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NodeDescriptor(BaseModel):
    """Immutable connection details for a Typesense node.

    Attributes:
        protocol: URL scheme, "http" or "https".
        host: Host name or address of the node.
        port: TCP port of the node.
        api_key: Key sent in the API-key header of every request.
    """

    model_config = ConfigDict(frozen=True)

    protocol: str = "http"
    host: str
    port: int = Field(ge=1, le=65535)
    api_key: str = Field(repr=False)

    @property
    def base_url(self) -> str:
        """Render ``{protocol}://{host}:{port}``."""
        return f"{self.protocol}://{self.host}:{self.port}"
