"""
Blog behaviour settings.

Switches for behaviours that older deployments of the blog handled
differently.

Dependencies: pydantic, pydantic_settings
System role: Behaviour variants for posts and login
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from blogger.configs.base import BaseSettings

DEFAULT_PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


class BlogSettings(BaseSettings):
    """Post listing, ownership and login behaviour."""

    model_config = SettingsConfigDict(env_prefix="BLOG_")

    populate_authors_on_list: bool = Field(
        default=True,
        description="Embed the referenced user/author in GET /api/posts",
    )
    allow_ownerless_post_mutation: bool = Field(
        default=False,
        description="Let any session update or delete a post that has no author",
    )
    login_failure_redirect: str = Field(
        default="/",
        description="Where a failed login redirects; empty answers 401 JSON instead",
    )
    public_dir: Path = Field(
        default=DEFAULT_PUBLIC_DIR,
        description="Directory holding the static client (views/index.html, views/profile.html)",
    )
