import logging
from dataclasses import dataclass
from datetime import date

import requests

from binbot.config import ReminderSettings
from binbot.errors import BinbotError
from binbot.services.notifier import Notifier
from binbot.services.schedule import decode_schedule, find_tomorrow
from binbot.services.schedule_source import build_session, fetch_schedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReminderResult:
    message: str | None = None
    bin_label: str | None = None
    error: str | None = None

    @property
    def sent(self) -> bool:
        return self.message is not None


def build_message(bin_label: str | None = None, error: BinbotError | str | None = None) -> str | None:
    if error is not None:
        return f"Error: {error}"
    if bin_label is None:
        return None
    return f"Put out {bin_label} for tomorrow"


def get_tomorrows_bin(settings: ReminderSettings, session: requests.Session, today: date) -> str | None:
    raw = fetch_schedule(session, settings.lookup_url, timeout=settings.request_timeout)
    schedule = decode_schedule(raw, settings.address_code)
    return find_tomorrow(schedule, today)


def send_bin_reminder(
    settings: ReminderSettings,
    today: date | None = None,
    session: requests.Session | None = None,
    notifier: Notifier | None = None,
) -> ReminderResult:
    if not today:
        today = date.today()

    if session is None:
        session = build_session(settings.user_agent)

    # NotifierConfigError is not caught: no channel to report it through
    if notifier is None:
        notifier = Notifier(
            session,
            settings.notification_url,
            mode=settings.notify_mode,
            timeout=settings.request_timeout,
        )

    try:
        bin_label = get_tomorrows_bin(settings, session, today)
    except BinbotError as e:
        logger.error("Bin lookup failed: %s", e)
        msg = build_message(error=e)
        notifier.send(msg)
        return ReminderResult(message=msg, error=str(e))

    msg = build_message(bin_label)
    if msg is None:
        logger.info("Nothing due on the day after %s", today)
        return ReminderResult()

    notifier.send(msg)
    return ReminderResult(message=msg, bin_label=bin_label)
