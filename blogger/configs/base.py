"""
Shared settings base for the blog.

Every settings group (server, database, session, blog) derives from
``BaseSettings`` here so they all read the same ``.env`` file the same way;
a group only adds its own ``env_prefix``.

Dependencies: pydantic_settings
System role: Common loading rules for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"


class BaseSettings(PydanticBaseSettings):
    """
    Base class for every blog settings group.

    Values come from the process environment first, then ``.env`` in the
    working directory. Names are case-insensitive and unknown keys are
    ignored, so one ``.env`` can hold every group's variables.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
