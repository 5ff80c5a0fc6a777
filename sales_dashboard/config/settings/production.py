# sales_dashboard/config/settings/production.py
from sales_dashboard.config.settings.base import BackendBaseSettings
from sales_dashboard.config.settings.environment import Environment

class BackendProdSettings(BackendBaseSettings):
    """Production-specific settings"""
    DESCRIPTION: str | None = "Production Environment - Retail Sales Dashboard API"
    DEBUG: bool = False
    ENVIRONMENT: Environment = Environment.PRODUCTION
    
    LOG_LEVEL: str = "WARNING"
    
    # CORS_ORIGINS will be loaded from .env in production
