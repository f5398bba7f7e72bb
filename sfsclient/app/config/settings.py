from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sfsclient.app.constants import MAX_RESPONSE_CHARACTERS, RETRY_POLICY


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    max_response_characters: int = Field(
        MAX_RESPONSE_CHARACTERS,
        validation_alias="SFS_MAX_RESPONSE_CHARACTERS",
        gt=0,
    )
    connect_timeout_seconds: float = Field(5.0, validation_alias="SFS_CONNECT_TIMEOUT_SECONDS")
    read_timeout_seconds: float = Field(15.0, validation_alias="SFS_READ_TIMEOUT_SECONDS")
    user_agent: str = Field("", validation_alias="SFS_USER_AGENT")

    # Retries happen above the connection, never inside it.
    retry_policy: str = Field(RETRY_POLICY.NONE, validation_alias="SFS_RETRY_POLICY")
    retry_max_attempts: int = Field(3, validation_alias="SFS_RETRY_MAX_ATTEMPTS", ge=1)
    initial_backoff_seconds: float = Field(0.5, validation_alias="SFS_INITIAL_BACKOFF_SECONDS")
    max_backoff_seconds: float = Field(8.0, validation_alias="SFS_MAX_BACKOFF_SECONDS")
    backoff_multiplier: float = Field(2.0, validation_alias="SFS_BACKOFF_MULTIPLIER")
