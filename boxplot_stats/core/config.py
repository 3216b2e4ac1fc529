"""Application configuration loaded from environment variables."""

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLOTLY_JS_MODES = {"cdn", "inline", "directory"}


class Settings(BaseSettings):
    """Typed settings object shared by the API and the service helpers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    service_name: str = Field(default="boxplot-stats", alias="SERVICE_NAME")
    environment: str = Field(default="local", alias="ENVIRONMENT")

    outlier_delimiter: str = Field(default="|", min_length=1, alias="OUTLIER_DELIMITER")
    plotly_js_mode: str = Field(default="cdn", alias="PLOTLY_JS_MODE")

    @field_validator("plotly_js_mode")
    @classmethod
    def plotly_js_mode_validate(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in PLOTLY_JS_MODES:
            raise ValueError(f"plotly_js_mode must be one of {sorted(PLOTLY_JS_MODES)}")
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def include_plotlyjs(self) -> str | bool:
        """Translate the configured mode into plotly's ``include_plotlyjs`` argument."""
        if self.plotly_js_mode == "inline":
            return True
        return self.plotly_js_mode


settings = Settings()
