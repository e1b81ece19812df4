# config.py
import os


# --- Clase Config (para create_app(Config)) ---
class Config:
    # Servidor
    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT", "3000"))

    # Debug / logging
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = "WARNING"
