from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    connect_timeout_seconds: float = Field(5.0, validation_alias="REQUESTABLE_CONNECT_TIMEOUT_SECONDS")
    read_timeout_seconds: float = Field(15.0, validation_alias="REQUESTABLE_READ_TIMEOUT_SECONDS")
    user_agent: str = Field("", validation_alias="REQUESTABLE_USER_AGENT")
    follow_redirects: bool = Field(True, validation_alias="REQUESTABLE_FOLLOW_REDIRECTS")

    # Inclusive bounds for response validation; anything outside is a failure.
    min_acceptable_status: int = Field(200, validation_alias="REQUESTABLE_MIN_ACCEPTABLE_STATUS")
    max_acceptable_status: int = Field(299, validation_alias="REQUESTABLE_MAX_ACCEPTABLE_STATUS")

    max_connections: int = Field(100, validation_alias="REQUESTABLE_MAX_CONNECTIONS")

    @model_validator(mode="after")
    def _check_status_bounds(self) -> "Settings":
        if self.min_acceptable_status > self.max_acceptable_status:
            raise ValueError(
                "REQUESTABLE_MIN_ACCEPTABLE_STATUS must not exceed REQUESTABLE_MAX_ACCEPTABLE_STATUS"
            )
        return self

    @property
    def acceptable_status(self) -> range:
        return range(self.min_acceptable_status, self.max_acceptable_status + 1)
