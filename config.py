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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./carwash.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", 0))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    APP_BASE_URL = data.get("APP_BASE_URL", "http://localhost:3000")

    # Super-admin access (approvals, pricing)
    SUPER_ADMIN_API_KEY = data.get("SUPER_ADMIN_API_KEY", "")

    # Payment gateway
    PAYSTACK_SECRET_KEY = data.get("PAYSTACK_SECRET_KEY", "")
    PAYSTACK_BASE_URL = data.get("PAYSTACK_BASE_URL", "https://api.paystack.co")
    PAYSTACK_TIMEOUT_SECONDS = float(data.get("PAYSTACK_TIMEOUT_SECONDS", 25.0))
    OPERATING_CURRENCY = data.get("OPERATING_CURRENCY", "KES")

    # Notifications
    EMAIL_RELAY_URL = data.get("EMAIL_RELAY_URL", None)

    # Credits given to a newly registered carwash
    SIGNUP_BONUS_CREDITS = data.get("SIGNUP_BONUS_CREDITS", 200)

    # Retry policy for aborted ledger transactions
    LEDGER_MAX_ATTEMPTS = int(data.get("LEDGER_MAX_ATTEMPTS", 3))
    LEDGER_RETRY_BASE_DELAY = float(data.get("LEDGER_RETRY_BASE_DELAY", 0.05))  # Seconds
    LEDGER_RETRY_MAX_DELAY = float(data.get("LEDGER_RETRY_MAX_DELAY", 1.0))  # Seconds
