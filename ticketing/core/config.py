import os

# Database configuration
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ticketing.db")
DB_TIMEOUT = float(os.getenv("DB_TIMEOUT", "5"))

# Redis configuration
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
REDIS_SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5"))
LOCK_TIMEOUT = float(os.getenv("LOCK_TIMEOUT", "10"))
LOCK_BLOCKING_TIMEOUT = float(os.getenv("LOCK_BLOCKING_TIMEOUT", "5"))

# HTTP server
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def get_database_url():
    return DATABASE_URL


def get_redis_url():
    return REDIS_URL
