import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[2] / ".env"  # backend/.env
load_dotenv(ENV_PATH)

# ---- DB ----
DB_HOST = os.getenv("DB_HOST", "127.0.0.1")
DB_PORT = os.getenv("DB_PORT", "3306")
DB_NAME = os.getenv("DB_NAME", "community")
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}?charset=utf8mb4",
)

# 기동 시 테이블 생성 여부 (운영 DB는 false 유지)
DB_AUTO_CREATE = os.getenv("DB_AUTO_CREATE", "false").lower() in ("1", "true", "yes")

# ---- User service (identity) ----
USER_SERVICE_BASE_URL = os.getenv("USER_SERVICE_BASE_URL", "http://localhost:8080")
USER_SERVICE_TIMEOUT = float(os.getenv("USER_SERVICE_TIMEOUT", "3"))

# ---- API ----
API_PREFIX = os.getenv("API_PREFIX", "/api/v1")
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]

# ---- Logging ----
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
LOG_FORMAT = os.getenv("LOG_FORMAT", "console")  # console / json
