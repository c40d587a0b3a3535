from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

# Load .env from repo root for local development and scripts.
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)
    app_env: str = Field(default="development", alias="APP_ENV")
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    seed_on_startup: bool = Field(default=True, alias="SEED_ON_STARTUP")
    seed_random_seed: int | None = Field(default=None, alias="SEED_RANDOM_SEED")
    seed_client_count: int = Field(default=50, alias="SEED_CLIENT_COUNT")
    default_top_limit: int = Field(default=10, alias="DEFAULT_TOP_LIMIT")
    default_recent_limit: int = Field(default=20, alias="DEFAULT_RECENT_LIMIT")
    mcp_enabled: bool = Field(default=True, alias="MCP_ENABLED")
    mcp_server_name: str = Field(default="portfolio-management-system", alias="MCP_SERVER_NAME")

    def cors_origin_list(self) -> list[str]:
        return [part.strip() for part in self.cors_origins.split(",") if part.strip()]

settings = Settings()
