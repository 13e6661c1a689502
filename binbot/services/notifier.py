import logging

import requests

from binbot.errors import NotifierConfigError

logger = logging.getLogger(__name__)

TITLE = "Bin Reminder"
PRIORITY = "5"


class Notifier:
    """
    Two modes:
    - fake: logs the notification only
    - real: multipart POST to NOTIFICATION_URL
    """

    def __init__(self, session: requests.Session, url: str, mode: str = "fake", timeout: float = 20):
        self.mode = mode.lower().strip()
        if self.mode not in ("fake", "real"):
            raise NotifierConfigError(f"Unknown NOTIFY_MODE '{mode}', expected 'fake' or 'real'")
        if self.mode == "real" and not url:
            raise NotifierConfigError("NOTIFICATION_URL missing. Set it to the notification endpoint.")

        self.session = session
        self.url = url
        self.timeout = timeout

    def form(self, message: str) -> dict:
        # (None, value) tuples make requests send plain multipart fields
        return {
            "title": (None, TITLE),
            "message": (None, message),
            "priority": (None, PRIORITY),
        }

    def send(self, message: str) -> dict:
        if self.mode == "fake":
            logger.info("[FAKE NOTIFICATION] %s: %s", TITLE, message)
            return {"mode": "fake", "title": TITLE, "message": message}

        try:
            response = self.session.post(self.url, files=self.form(message), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            # best effort: nowhere left to report a failed delivery
            logger.warning("Notification delivery failed: %s", e)
            return {"mode": "real", "delivered": False, "error": str(e)}

        return {"mode": "real", "delivered": True, "status": response.status_code}
