from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Tile Layout Preview"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # comma-separated

    # Layout defaults
    LAYOUT_PADDING_PX: float = 20.0
    LAYOUT_MAX_CANDIDATES: int = 250_000  # per request, enforced by the API only

    # Renderer style: fill + 1px stroke per unit, 2px outline around the plane
    STYLE_FILL_COLOR: str = "#e0e0e0"
    STYLE_STROKE_COLOR: str = "#333333"
    STYLE_STROKE_WIDTH: float = 1.0
    STYLE_OUTLINE_COLOR: str = "#0055aa"
    STYLE_OUTLINE_WIDTH: float = 2.0

    class Config:
        env_file = ".env"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
