import os

from dotenv import load_dotenv

load_dotenv()

RECEIPT_STORE = os.getenv("RECEIPT_STORE", "memory")

PROCESS_RATE_LIMIT = os.getenv("PROCESS_RATE_LIMIT", "120/minute")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")]

SENTRY_DSN = os.getenv("SENTRY_DSN")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
