import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Backend that owns client records and registrations
    CLIENTS_API_URL = os.getenv("CLIENTS_API_URL", "http://10.152.237.129:5000").rstrip("/")

    MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    if ENVIRONMENT not in ("development", "production", "testing"):
        raise ValueError(f"Invalid ENVIRONMENT: {ENVIRONMENT}")

settings = Settings()
