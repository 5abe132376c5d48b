import os
from typing import Optional

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment from project-level .env
# ---------------------------------------------------------------------------

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ENV_PATH = os.path.join(BASE_DIR, ".env")

load_dotenv(ENV_PATH)


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_WEATHER_URL_TEMPLATE = "https://wttr.in/{city}?format=j1"


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


USER_AGENT = os.getenv("WEB_TOOLS_USER_AGENT", DEFAULT_USER_AGENT)

# None keeps the requests default (no timeout).
HTTP_TIMEOUT: Optional[float] = _optional_float("WEB_TOOLS_HTTP_TIMEOUT")

WEATHER_URL_TEMPLATE = os.getenv("WEATHER_URL_TEMPLATE", DEFAULT_WEATHER_URL_TEMPLATE)

LOG_LEVEL = os.getenv("WEB_TOOLS_LOG_LEVEL", "INFO").upper()

HTTP_HOST = os.getenv("WEB_TOOLS_HTTP_HOST", "127.0.0.1")
HTTP_PORT = int(os.getenv("WEB_TOOLS_HTTP_PORT", "8010"))
