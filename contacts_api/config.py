"""
Configuration for the application
"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings
    """

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "mycontacts-backend"
    port: int = 5001
    log_level: str = "INFO"

    # Access token configuration
    access_token_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 15

    # Password hashing cost factor
    bcrypt_rounds: int = 10

    # Error responses include the formatted traceback when enabled
    expose_stack_trace: bool = True

    frontend_url: str = "http://localhost:3000"
    allow_all_origins: bool = False

    class Config:
        """
        Configuration for the application settings
        """
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings with caching.
    
    Returns:
        Settings: The application configuration settings.
    """
    return Settings()
