import os


class Settings:
    PROJECT_NAME: str = "kotoba"
    DEBUG: bool = os.environ.get("KOTOBA_DEBUG", "0") == "1"
    LOG_DIR: str = os.environ.get("KOTOBA_LOG_DIR", "log")
    LOG_FILE: str = "kotoba.log"
    LOG_DB_ENABLED: bool = os.environ.get("KOTOBA_LOG_DB", "0") == "1"
    DB_DIR: str = os.environ.get("KOTOBA_DB_DIR", "db")
    DB_FILE: str = "kotoba.db"
    VOCAB_DIR: str = os.environ.get("KOTOBA_VOCAB_DIR", "vocabulary")
    DEFAULT_DECK: str = "core"
    SESSION_COOKIE_NAME: str = "kotoba_session_id"
    SESSION_TIMEOUT_MINUTES: int = 120
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
