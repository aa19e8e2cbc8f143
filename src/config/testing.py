# Testing Configuration for Storefront Service
from src.config import Config


class TestingConfig(Config):
    """Test configuration settings"""

    ENVIRONMENT = "test"
    DEBUG = True

    DATABASE_NAME = "storefront_test_db"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS = 1000
