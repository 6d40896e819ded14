import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Single-file store next to the working directory
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///raisin_tracker.db")

RATE_PER_KG = float(os.getenv("RATE_PER_KG", "3"))
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
