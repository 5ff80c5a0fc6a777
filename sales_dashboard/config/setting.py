# sales_dashboard/config/setting.py
"""
Settings manager - picks the settings class for the current environment.
Everything else imports `settings` from here.
"""
from decouple import config
from sales_dashboard.config.settings.base import BackendBaseSettings
from sales_dashboard.config.settings.development import BackendDevSettings
from sales_dashboard.config.settings.staging import BackendStageSettings
from sales_dashboard.config.settings.production import BackendProdSettings

# Determine environment from .env file
ENV = config("ENVIRONMENT", default="DEV")

def get_settings(env: str = None) -> BackendBaseSettings:
    """
    Factory function to return appropriate settings based on environment
    """
    env_map = {
        "DEV": BackendDevSettings,
        "DEVELOPMENT": BackendDevSettings,
        "STAGE": BackendStageSettings,
        "STAGING": BackendStageSettings,
        "PROD": BackendProdSettings,
        "PRODUCTION": BackendProdSettings,
    }
    
    settings_class = env_map.get((env or ENV).upper(), BackendDevSettings)
    # Long-form names ("DEVELOPMENT") are accepted here but are not enum values
    return settings_class(ENVIRONMENT=settings_class.model_fields["ENVIRONMENT"].default)

# Global settings instance
settings = get_settings()

def validate_settings():
    """Validate critical settings on startup"""
    errors = []
    
    if not settings.MONGODB_URI:
        errors.append("MONGODB_URI must be set")
        
    if not settings.DATABASE_NAME:
        errors.append("DATABASE_NAME must be set")
    
    if not settings.TRANSACTIONS_COLLECTION:
        errors.append("TRANSACTIONS_COLLECTION must be set")
    
    if settings.DEFAULT_PAGE_SIZE < 1:
        errors.append("DEFAULT_PAGE_SIZE must be at least 1")
    
    if settings.MAX_PAGE_SIZE < settings.DEFAULT_PAGE_SIZE:
        errors.append("MAX_PAGE_SIZE must not be smaller than DEFAULT_PAGE_SIZE")
    
    if settings.EXPORT_MAX_RECORDS < 1:
        errors.append("EXPORT_MAX_RECORDS must be at least 1")
    
    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")
    
    return True
