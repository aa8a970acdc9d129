import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Query facade paging
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 20))
    MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", 100))

    # Bounded retries for slug / public id races
    SLUG_MAX_ATTEMPTS = int(os.getenv("SLUG_MAX_ATTEMPTS", 5))
    PUBLIC_ID_MAX_ATTEMPTS = int(os.getenv("PUBLIC_ID_MAX_ATTEMPTS", 5))

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///shakes-dev.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SECRET_KEY = "testing-secret"
    JWT_SECRET_KEY = "testing-jwt-secret-key-with-32-plus-bytes"
    LOG_LEVEL = "DEBUG"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
