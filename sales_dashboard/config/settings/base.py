# sales_dashboard/config/settings/base.py
import pathlib
from decouple import config
from pydantic_settings import BaseSettings
from typing import Optional

ROOT_DIR: pathlib.Path = pathlib.Path(__file__).parent.parent.parent.parent.resolve()

class BackendBaseSettings(BaseSettings):
    """
    Base settings shared by every environment.
    Environment-specific classes override only what differs.
    """
    
    # Application Metadata
    TITLE: str = "Retail Sales Dashboard API"
    VERSION: str = "1.0.0"
    TIMEZONE: str = "UTC"
    DESCRIPTION: Optional[str] = "Search, filter, export and summarize retail transactions"
    DEBUG: bool = config("DEBUG", default=False, cast=bool)
    
    # Server Configuration
    SERVER_HOST: str = config("API_HOST", default="0.0.0.0", cast=str)
    SERVER_PORT: int = config("API_PORT", default=5000, cast=int)
    API_PREFIX: str = "/api"
    DOCS_URL: str = "/docs"
    OPENAPI_URL: str = "/openapi.json"
    REDOC_URL: str = "/redoc"
    
    # MongoDB Configuration
    MONGODB_URI: str = config("MONGODB_URI", default="mongodb://localhost:27017/truestate")
    DATABASE_NAME: str = config("DATABASE_NAME", default="truestate")
    TRANSACTIONS_COLLECTION: str = config("TRANSACTIONS_COLLECTION", default="transactions")
    MONGO_TIMEOUT_MS: int = config("MONGO_TIMEOUT_MS", default=5000, cast=int)
    MONGO_MAX_POOL_SIZE: int = config("MONGO_MAX_POOL_SIZE", default=50, cast=int)
    ENSURE_INDEXES: bool = config("ENSURE_INDEXES", default=True, cast=bool)
    
    # CORS Configuration
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]
    
    # Logging Configuration
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")
    LOG_DIR: str = config("LOG_DIR", default="logs")
    LOG_TO_FILE: bool = config("LOG_TO_FILE", default=True, cast=bool)
    
    # Listing / export limits
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_SIZE: int = config("DEFAULT_PAGE_SIZE", default=10, cast=int)
    MAX_PAGE_SIZE: int = config("MAX_PAGE_SIZE", default=1000, cast=int)
    EXPORT_MAX_RECORDS: int = config("EXPORT_MAX_RECORDS", default=50000, cast=int)
    STATS_TOP_CATEGORIES: int = config("STATS_TOP_CATEGORIES", default=10, cast=int)
    
    # API Configuration
    API_TITLE: str = TITLE
    API_DESCRIPTION: str = DESCRIPTION or "Search, filter, export and summarize retail transactions"
    API_VERSION: str = VERSION
    API_HOST: str = SERVER_HOST
    API_PORT: int = SERVER_PORT
    
    class Config:
        case_sensitive: bool = True
        env_file: str = f"{str(ROOT_DIR)}/.env"
        env_file_encoding: str = "utf-8"
        validate_assignment: bool = True
        extra: str = "ignore"
    
    @property
    def set_backend_app_attributes(self) -> dict[str, str | bool | None]:
        """
        FastAPI application attributes
        """
        return {
            "title": self.TITLE,
            "version": self.VERSION,
            "debug": self.DEBUG,
            "description": self.DESCRIPTION,
            "docs_url": self.DOCS_URL,
            "openapi_url": self.OPENAPI_URL,
            "redoc_url": self.REDOC_URL,
        }
