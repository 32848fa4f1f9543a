from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from typestats.domain.constants import (
    CSV_FILENAME,
    DEFAULT_LESSON_TYPE,
    DEFAULT_PERIOD,
    GRAPH_MAX_WIDTH,
)


def config_files() -> list[Path]:
    return [
        Path.home() / ".config/typestats/config.toml",
        Path.home() / ".typestats.toml",
    ]


class AppConfig(BaseSettings):
    """
    Configuration model for typestats.
    Supports loading from:
    1. Environment variables (TYPESTATS_*)
    2. Config file (~/.config/typestats/config.toml)
    3. Manual overrides (CLI)
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPESTATS_",
        extra="ignore",
    )

    # Report
    lesson_type: str = DEFAULT_LESSON_TYPE
    period: Literal["day", "week", "month", "year"] = DEFAULT_PERIOD

    # Output
    csv_path: Path = Field(default_factory=lambda: Path(".") / CSV_FILENAME)
    graph_max_width: int = Field(default=GRAPH_MAX_WIDTH, gt=0)
    colors: bool = False

    # Fixed terminal width; None means probe with `tput cols`
    terminal_width: int | None = None

    verbose: int = 0

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # First existing file wins
        toml_file = next((f for f in config_files() if f.exists()), None)

        # Earlier sources take priority: CLI overrides, then env, then file
        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (init_settings, env_settings)

    @field_validator("csv_path", mode="before")
    @classmethod
    def expand_csv_path(cls, v: Any) -> Path:
        return Path(v).expanduser()


def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in AppConfig
    2. ~/.config/typestats/config.toml (if exists)
    3. Environment variables (TYPESTATS_*)
    4. cli_overrides (None values are dropped so lower layers show through)
    """
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    return AppConfig(**overrides)
