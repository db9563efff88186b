from pydantic import BaseModel, HttpUrl, field_validator


class Config(BaseModel):
    base_url: str | None = None
    secret: str | None = None
    timeout: float | None = None
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str | None) -> str | None:
        if value is None or value == "":
            return None
        url_value = HttpUrl(url=value)
        assert url_value.host, "Invalid URL"
        return value

    @field_validator("secret", mode="before")
    @classmethod
    def empty_secret(cls, value: str | None) -> str | None:
        return value or None
