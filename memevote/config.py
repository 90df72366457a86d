import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # project root (where wsgi.py is)
load_dotenv(BASE_DIR / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///memevote.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # Create the votes table + unique email index on startup
    STORE_AUTO_CREATE = _env_flag("STORE_AUTO_CREATE", "true")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    SWAGGER_TITLE = "Meme Vote API"
    SWAGGER_VERSION = "1.0.0"
    SWAGGER = {"title": SWAGGER_TITLE, "uiversion": 3}


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    STORE_AUTO_CREATE = True
    LOG_LEVEL = "DEBUG"
