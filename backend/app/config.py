import os
from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "600"))
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.2"))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///listing_assistant.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated, e.g. "https://shop.example.com,http://localhost:5173"
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Catalog tuning
COMPARABLE_LIMIT = 10
SEARCH_RESULT_LIMIT = 20
COMPARABLE_BAND = 0.10
CATEGORY_BAND = 0.15
LOW_PRICE_FACTOR = 0.7
HIGH_PRICE_FACTOR = 1.3
DEFAULT_CATALOG_AVERAGE = 30000
