"""
Central configuration management for Workout Programs
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Program data (local directory or http(s) base URL)
    data_source: str = "data"
    program_ids: List[str] = ["arturos-workout", "mohamed-ali-workout"]
    fetch_timeout: float = 10.0
    max_workers: int = 4

    # Demo video links
    video_search_url: str = "https://www.youtube.com/results?search_query="

    # Streamlit
    streamlit_server_port: int = 8501
    streamlit_server_address: str = "localhost"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
