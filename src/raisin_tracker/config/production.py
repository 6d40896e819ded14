import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///raisin_tracker.db")

RATE_PER_KG = float(os.getenv("RATE_PER_KG", "3"))
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
