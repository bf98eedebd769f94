"""应用配置管理."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置（环境变量）."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 后端 API 配置
    api_base_url: str = "http://localhost:8080/api"
    api_timeout_seconds: float = 30.0
    api_success_code: int = 200
    api_headers: dict[str, str] = {}


@lru_cache
def get_settings() -> Settings:
    """获取应用配置（带缓存）."""
    return Settings()
