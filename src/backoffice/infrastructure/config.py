"""Application settings.

Read from the environment (prefix ``BACKOFFICE_``) and an optional
``.env`` file in the working directory.
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="BACKOFFICE_",
        env_file=".env",
        extra="ignore",
    )

    database_url: str = "sqlite:///data/backoffice.db"
    echo_sql: bool = False
    log_level: str = "INFO"

    # "permissive" writes any status from any state; "strict" follows
    # pending -> confirmed -> processing -> completed (+ cancelled).
    status_policy: Literal["permissive", "strict"] = "permissive"

    # Acting user recorded on new orders when the caller does not pass one.
    default_user_id: int = 1
    order_number_prefix: str = "PED"
