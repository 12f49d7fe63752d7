"""
Settings Configuration
Pydantic-validated configuration read from the environment and config/.env
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class GitHubSettings(BaseSettings):
    """GitHub API configuration"""
    token: Optional[str] = Field(default=None, description="GitHub personal access token")
    api_url: str = Field(default="https://api.github.com", description="REST API base URL")
    user_agent: str = Field(default="BioSearch/1.0", description="User-Agent header")
    api_version: str = Field(default="2022-11-28", description="X-GitHub-Api-Version header")

    class Config:
        env_prefix = "GITHUB_"


class GeneralSettings(BaseSettings):
    """Transport settings shared by every provider"""
    request_timeout: float = Field(default=30.0, description="Request timeout (seconds)")
    max_retries: int = Field(default=3, description="Attempts for transport-level failures")
    retry_delay: float = Field(default=1.0, description="Exponential backoff multiplier (seconds)")


class LoggingSettings(BaseSettings):
    """Logging configuration"""
    level: str = Field(default="INFO", description="Root log level")
    file: Optional[str] = Field(default=None, description="Log file name under logs/ (optional)")
    use_rich: bool = Field(default=True, description="Use rich console output")

    class Config:
        env_prefix = "LOG_"


class Settings(BaseSettings):
    """Top-level settings aggregating every group"""

    github: GitHubSettings = Field(default_factory=GitHubSettings)
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @classmethod
    def load_from_env_file(cls, env_path: Optional[Path] = None) -> "Settings":
        """Load settings after applying the given .env file (config/.env by default)"""
        if env_path is None:
            env_path = Path(__file__).parent / ".env"

        if env_path.exists():
            from dotenv import load_dotenv
            load_dotenv(env_path)

        return cls(
            github=GitHubSettings(),
            general=GeneralSettings(),
            logging=LoggingSettings(),
        )


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings singleton"""
    return Settings.load_from_env_file()


def get_logging_settings() -> LoggingSettings:
    return get_settings().logging
