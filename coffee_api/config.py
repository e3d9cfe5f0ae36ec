from typing import List, Optional
from urllib.parse import quote_plus
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Values come from the process environment or a local .env file
    (server port, MongoDB Atlas credentials, logging).
    """
    model_config = SettingsConfigDict(env_file='./.env', extra='ignore')

    # SERVER

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]

    # MONGODB

    DB_USER: str
    DB_PASS: str
    DB_CLUSTER: str = "cluster0.zkpltdq.mongodb.net"
    DB_APP_NAME: str = "Cluster0"
    DB_NAME: str = "coffeeDB"

    DATABASE_URL: Optional[str] = None

    @model_validator(mode='after')
    def assemble_db_connection(self) -> 'AppConfig':
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
                f"@{self.DB_CLUSTER}/?appName={self.DB_APP_NAME}"
            )
        return self

    # Logging
    LOG_LEVEL: str = "INFO"  # can be: TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL


# Singleton instance of application configuration
app_config = AppConfig()
