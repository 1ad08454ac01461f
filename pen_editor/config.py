"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Editor settings loaded from environment variables.

    Priority: environment variables (PEN_EDITOR_*) > .env file > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="PEN_EDITOR_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Editing
    hit_radius: float = 10.0  # pointer must be strictly closer than this to hit
    default_handle_length: float = 30.0  # horizontal handle offset for new anchors
    history_limit: int | None = None  # max undo entries, None = unbounded

    # Export
    stroke_width: float = 2
    export_stroke: str = "black"
    editing_stroke: str = "red"
    stroke_follows_mode: bool = False  # use editing_stroke while drawing

    # Overlay import
    overlay_viewbox: str = "0 0 100 100"

    # Preview rendering
    canvas_width: int = 800
    canvas_height: int = 600
    path_steps_per_unit: float = 0.5  # flattening density for preview curves

    # Logging
    log_json: bool = False
    log_level: str = "INFO"
    log_file: str | None = None


settings = Settings()
