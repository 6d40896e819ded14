import os

SECRET_KEY = "test-secret"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///raisin_tracker_test.db")

RATE_PER_KG = 3.0
CURRENCY_SYMBOL = "₹"

DEBUG = False
TESTING = True

AUTO_INIT_DB = True
AUTO_SEED_DB = False
