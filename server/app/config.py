import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

env_path = Path(__file__).parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001,http://localhost:3003"

class Settings(BaseModel):
    transition_delay: float = float(os.getenv("WIZARD_TRANSITION_DELAY", "1.5"))
    cors_origins: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
        if origin.strip()
    ]
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    max_sessions: int = int(os.getenv("WIZARD_MAX_SESSIONS", "1000"))
    session_idle_timeout: float = float(os.getenv("WIZARD_SESSION_IDLE_TIMEOUT", "1800"))

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
