# sales_dashboard/config/settings/staging.py
from sales_dashboard.config.settings.base import BackendBaseSettings
from sales_dashboard.config.settings.environment import Environment

class BackendStageSettings(BackendBaseSettings):
    """Staging-specific settings"""
    DESCRIPTION: str | None = "Staging Environment - Retail Sales Dashboard API"
    DEBUG: bool = True
    ENVIRONMENT: Environment = Environment.STAGING
    
    # Staging might point at a copy of the dataset
    # DATABASE_NAME: str = "truestate-staging"
