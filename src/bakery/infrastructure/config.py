import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

DEFAULT_ORDER_URL = "https://reqres.in/api/cupcakes"


@dataclass(frozen=True)
class Settings:
    order_url: str = field(
        default_factory=lambda: os.getenv("BAKERY_ORDER_URL", DEFAULT_ORDER_URL)
    )
    # seconds
    http_timeout: float = field(
        default_factory=lambda: float(os.getenv("BAKERY_HTTP_TIMEOUT", "60"))
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("BAKERY_LOG_LEVEL", "WARNING").upper()
    )


settings = Settings()
