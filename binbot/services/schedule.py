import logging
from datetime import date, timedelta
from typing import Iterable

from binbot.models import CodedToken, ScheduleEntry
from binbot.services.bin_types import bin_label
from binbot.services.date_codes import decode_date
from binbot.services.tokens import locate_and_tokenize

logger = logging.getLogger(__name__)


def decode_token(token: CodedToken) -> ScheduleEntry:
    return ScheduleEntry(date=decode_date(token.date_code), bin=bin_label(token.bin_code))


def decode(tokens: Iterable[CodedToken]) -> list[ScheduleEntry]:
    # first bad token aborts, no partial schedule
    return [decode_token(t) for t in tokens]


def decode_schedule(raw_text: str, address_key: str) -> list[ScheduleEntry]:
    schedule = decode(locate_and_tokenize(raw_text, address_key))
    logger.debug("Decoded %d schedule entries for %s", len(schedule), address_key)
    return schedule


def find_tomorrow_entry(schedule: Iterable[ScheduleEntry], today: date) -> ScheduleEntry | None:
    """
    Rules:
    - tomorrow is today + 1 day (month/year rollover handled by date)
    - first entry in source order wins, later duplicates are ignored
    - nothing due tomorrow -> None
    """
    target = today + timedelta(days=1)

    for entry in schedule:
        if entry.date == target:
            return entry
    return None


def find_tomorrow(schedule: Iterable[ScheduleEntry], today: date) -> str | None:
    entry = find_tomorrow_entry(schedule, today)
    if entry is None:
        return None
    return entry.label
