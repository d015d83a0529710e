import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# ---------------------------------------------------------
# Load Config
# ---------------------------------------------------------
load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    service_name: str = os.getenv("SERVICE_NAME", "registration-service")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:5173,*")
        )
    )
    # Email and name length cap
    max_field_length: int = int(os.getenv("MAX_FIELD_LENGTH", "50"))
    license_plate_max_length: int = int(os.getenv("LICENSE_PLATE_MAX_LENGTH", "8"))

    def __post_init__(self):
        for name in ("max_field_length", "license_plate_max_length"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")


settings = Settings()
