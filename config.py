import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", False))

    # Invoice form actions
    INVOICES_LISTING_PATH = data.get("INVOICES_LISTING_PATH", "/dashboard/invoices")
    REPORT_MISSING_INVOICE = bool(data.get("REPORT_MISSING_INVOICE", False))  # 404 on unknown id

    # Page revalidation
    CACHE_BACKEND = data.get("CACHE_BACKEND", "log")  # "log" or "redis"
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    CACHE_KEY_PREFIX = data.get("CACHE_KEY_PREFIX", "page:")
    REVALIDATION_WEBHOOK_URL = data.get("REVALIDATION_WEBHOOK_URL", None)
    REVALIDATION_SECRET = data.get("REVALIDATION_SECRET", None)
