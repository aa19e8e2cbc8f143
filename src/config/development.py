# Development Configuration for Storefront Service
from src.config import Config


class DevelopmentConfig(Config):
    """Development configuration settings"""

    ENVIRONMENT = "development"
    DEBUG = True

    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    LOG_LEVEL = "DEBUG"
