import os

from dotenv import load_dotenv

load_dotenv()

def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")

class Config:
    JSON_SORT_KEYS = False
    ENV = os.getenv("FLASK_ENV", "production")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Stripe
    STRIPE_SECRET_KEY = os.environ.get("STRIPE_SECRET_KEY", "")

    # Redirects
    SITE_URL = os.environ.get("SITE_URL", "https://justpeacheyrentals.com")
    SUCCESS_PATH = os.environ.get("SUCCESS_PATH", "/success?session_id={CHECKOUT_SESSION_ID}")
    CANCEL_PATH = os.environ.get("CANCEL_PATH", "/cancel")
    CORS_ORIGIN = os.environ.get("CORS_ORIGIN", "https://justpeacheyrentals.com")

    # Validation policy for /api/create-checkout-session, e.g. "contact_id"
    CHECKOUT_REQUIRED_FIELDS = os.environ.get("CHECKOUT_REQUIRED_FIELDS", "")
    ALLOW_ZERO_TOTAL = _env_bool("ALLOW_ZERO_TOTAL")

    @staticmethod
    def init_app(app):
        app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
        if not app.config.get("STRIPE_SECRET_KEY") and not app.testing:
            app.logger.warning("STRIPE_SECRET_KEY is not set; payment calls will fail")

class TestConfig(Config):
    TESTING = True
    STRIPE_SECRET_KEY = "sk_test_dummy"
    SITE_URL = "https://rentals.example.com"
    CORS_ORIGIN = "https://rentals.example.com"
    CHECKOUT_REQUIRED_FIELDS = ""
    ALLOW_ZERO_TOTAL = False
