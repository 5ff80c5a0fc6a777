# sales_dashboard/config/settings/development.py
from sales_dashboard.config.settings.base import BackendBaseSettings
from sales_dashboard.config.settings.environment import Environment

class BackendDevSettings(BackendBaseSettings):
    """Development-specific settings"""
    DESCRIPTION: str | None = "Development Environment - Retail Sales Dashboard API"
    DEBUG: bool = True
    ENVIRONMENT: Environment = Environment.DEVELOPMENT
    
    LOG_LEVEL: str = "DEBUG"
    
    # Vite / CRA dev servers
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
