import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

FEED_URL_TEMPLATE = "https://isthereanydeal.com/feeds/waitlist.rss?token={token}"
SITE_BASE_URL = "https://isthereanydeal.com"
# Imagem embutida (SVG cinza), não depende de nenhum serviço externo
DEFAULT_THUMBNAIL_URL = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' width='120' height='45'%3E"
    "%3Crect width='100%25' height='100%25' fill='%23dddddd'/%3E%3C/svg%3E"
)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def parse_flag(value: Optional[str], default: bool) -> bool:
    """Interpreta "1/0", "true/false", "yes/no", "on/off". Qualquer outra coisa -> default."""
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def parse_positive_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        number = int(value.strip())
    except ValueError:
        return default
    return number if number > 0 else default


class Settings(BaseModel):
    """Configuração lida uma única vez na inicialização do processo."""

    rss_token: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8080
    show_thumbnails: bool = True
    collapse_after: int = 5
    feed_item_limit: int = 2
    default_thumbnail_url: str = DEFAULT_THUMBNAIL_URL
    request_timeout: float = Field(default=15.0, gt=0)

    @field_validator("port")
    @classmethod
    def _valid_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("PORT must be a valid u16 number")
        return value

    @property
    def feed_url(self) -> str:
        if not self.rss_token:
            raise RuntimeError("WAITLIST_RSS_TOKEN must be set in the environment")
        return FEED_URL_TEMPLATE.format(token=self.rss_token)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            rss_token=os.getenv("WAITLIST_RSS_TOKEN") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8080")),
            show_thumbnails=parse_flag(os.getenv("SHOW_THUMBNAILS"), True),
            collapse_after=parse_positive_int(os.getenv("COLLAPSE_AFTER"), 5),
            feed_item_limit=parse_positive_int(os.getenv("FEED_ITEM_LIMIT"), 2),
            default_thumbnail_url=os.getenv("DEFAULT_THUMBNAIL_URL", DEFAULT_THUMBNAIL_URL),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "15")),
        )
