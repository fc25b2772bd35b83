from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EndpointSettings(BaseModel):
    """
    Routes for the logical endpoint names used by the friends layer
    """
    friend: str = "/bq/friend"
    find: str = "/ph/find_friends"
    find_nearby: str = "/bq/find_nearby_friends"
    search: str = "/loq/friend_search"
    exists: str = "/bq/user_exists"
    suggest_friend: str = "/bq/suggest_friend"

    def resolve(self, name: str) -> str:
        """
        Map a logical name such as "friends.findNearby" to its route
        """
        names = {
            "friends.friend": self.friend,
            "friends.find": self.find,
            "friends.findNearby": self.find_nearby,
            "friends.search": self.search,
            "friends.exists": self.exists,
            "misc.suggestFriend": self.suggest_friend,
        }
        try:
            return names[name]
        except KeyError:
            raise KeyError(f"Unknown endpoint: {name}") from None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SNAPFRIENDS_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    base_url: str = Field(default="https://feelinsonice-hrd.appspot.com")
    timeout: float = 30.0
    # Transport-level attempts; the friends layer itself never retries
    max_retries: int = 1
    retry_delay: float = 1.0
    log_level: str = "INFO"

    endpoints: EndpointSettings = Field(default_factory=EndpointSettings)

    @field_validator("base_url", mode="before")
    @classmethod
    def normalize_base_url(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.strip().rstrip("/")

    @field_validator("max_retries")
    @classmethod
    def check_max_retries(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_retries must be at least 1")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.strip().upper()


def load_config(**overrides) -> Settings:
    return Settings(**overrides)
