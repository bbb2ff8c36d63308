"""
Session cookie configuration settings.

Controls the signed cookie used by Starlette's SessionMiddleware. The
default lifetime is short: sessions expire one minute after
the cookie was last issued.

Dependencies: pydantic, pydantic_settings
System role: Login session configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from blogger.configs.base import BaseSettings


class SessionSettings(BaseSettings):
    """Signed session cookie configuration."""

    model_config = SettingsConfigDict(env_prefix="SESSION_")

    secret_key: str = Field(
        default="DirtyLittleBlogger",
        description="Key used to sign the session cookie",
    )
    cookie_name: str = Field(default="session", description="Session cookie name")
    max_age: int = Field(default=60, description="Session lifetime in seconds")
    same_site: Literal["lax", "strict", "none"] = Field(
        default="lax",
        description="SameSite attribute of the session cookie",
    )
    https_only: bool = Field(default=False, description="Set the Secure cookie flag")
