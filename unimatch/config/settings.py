"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Supabase / PostgREST data service
    SUPABASE_URL = os.getenv("SUPABASE_URL", "http://localhost:54321")
    SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY", "")
    DATA_SERVICE_TIMEOUT = float(os.getenv("DATA_SERVICE_TIMEOUT", "10"))

    # Auth (Supabase access tokens are HS256 JWTs)
    SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET", "")
    SUPABASE_JWT_AUDIENCE = os.getenv("SUPABASE_JWT_AUDIENCE", "authenticated")

    # Message requests
    # Shown to the recipient when the service does not return a blocked_until
    REQUEST_COOLDOWN_FALLBACK_DAYS = int(
        os.getenv("REQUEST_COOLDOWN_FALLBACK_DAYS", "30")
    )
    PENDING_REQUEST_LIMIT = int(os.getenv("PENDING_REQUEST_LIMIT", "50"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )
