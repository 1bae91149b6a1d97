import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./contacts.sqlite")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 10))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", 100))

# "reject" answers 400 for size > MAX_PAGE_SIZE, "cap" clamps it to MAX_PAGE_SIZE
PAGE_SIZE_POLICY = os.getenv("PAGE_SIZE_POLICY", "reject").strip().lower()
