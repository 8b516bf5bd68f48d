"""Constants shared by the Gamma client modules."""

GAMMA_URL = "https://gamma-api.polymarket.com"
GROK_URL = "https://polymarket.com/api/grok"

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

HTTP_OK = 200
HTTP_MULTIPLE_CHOICES = 300
