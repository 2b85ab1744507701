"""Storefront Service Configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "VRTFlow Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    # Idle storefront sessions are dropped after this many hours
    session_max_age_hours: float = 24

    # Delivery endpoint that receives cart submissions
    delivery_base_url: str = "http://localhost:8080"
    delivery_path: str = "/api/send-email"
    delivery_to: str = "orders@vrtflow.com"
    delivery_subject: str = "New Cart Submission"
    delivery_timeout_seconds: float = 10.0

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        env_prefix = "VRTFLOW_"
        case_sensitive = False

    @property
    def delivery_url(self) -> str:
        """Full URL of the delivery endpoint"""
        return f"{self.delivery_base_url.rstrip('/')}{self.delivery_path}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
