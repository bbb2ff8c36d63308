"""
HTTP server configuration settings.

Listen address for the uvicorn entry point. PORT keeps the name used by
most hosting platforms.

Dependencies: pydantic, blogger.configs.base
System role: Server bind configuration
"""

from pydantic import Field

from blogger.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """Uvicorn bind settings."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, description="Port to listen on")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")
