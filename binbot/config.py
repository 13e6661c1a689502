import os
from dataclasses import dataclass

from dotenv import load_dotenv

from binbot.errors import ConfigError

# Config reads the environment at import time
load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    LOOKUP_URL = os.getenv("LOOKUP_URL", "")
    NOTIFICATION_URL = os.getenv("NOTIFICATION_URL", "")
    ADDRESS_CODE = os.getenv("ADDRESS_CODE", "")

    USER_AGENT = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "20"))

    CRON_SECRET = os.getenv("CRON_SECRET", "super-secret")
    NOTIFY_MODE = os.getenv("NOTIFY_MODE", "fake")


@dataclass(frozen=True)
class ReminderSettings:
    lookup_url: str
    notification_url: str
    address_code: str
    notify_mode: str = "fake"
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 20.0

    def __post_init__(self):
        if not self.lookup_url:
            raise ConfigError("LOOKUP_URL missing. Set it to the schedule lookup address.")
        if not self.address_code:
            raise ConfigError("ADDRESS_CODE missing. Set it to the address key to look up.")

    @classmethod
    def from_config(cls, source) -> "ReminderSettings":
        """
        source is either a mapping (app.config) or an object
        with Config-style attributes.
        """
        if isinstance(source, dict):
            get = source.get
        else:
            def get(key, default=None):
                return getattr(source, key, default)

        return cls(
            lookup_url=get("LOOKUP_URL") or "",
            notification_url=get("NOTIFICATION_URL") or "",
            address_code=get("ADDRESS_CODE") or "",
            notify_mode=(get("NOTIFY_MODE") or "fake").lower().strip(),
            user_agent=get("USER_AGENT") or DEFAULT_USER_AGENT,
            request_timeout=float(get("REQUEST_TIMEOUT") or 20),
        )
