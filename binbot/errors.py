class BinbotError(Exception):
    """Base for every failure that ends up in an "Error: ..." notification."""


class ConfigError(Exception):
    """Settings are unusable; raised before any lookup, so never notified."""


class TransportError(BinbotError):
    """Fetching the schedule failed at the network/HTTP layer."""


class ScheduleDecodeError(BinbotError):
    pass


class AddressNotFoundError(ScheduleDecodeError):
    def __init__(self, address_key: str):
        super().__init__(f"No result found for address '{address_key}'")
        self.address_key = address_key


class MalformedLineError(ScheduleDecodeError):
    pass


class MalformedLengthError(ScheduleDecodeError):
    pass


class InvalidRadixDigitError(ScheduleDecodeError):
    pass


class InvalidDateEncodingError(ScheduleDecodeError):
    pass


class InvalidCalendarDateError(ScheduleDecodeError):
    pass


class NotifierConfigError(Exception):
    """
    Raised when the notifier cannot be built.
    Deliberately not a BinbotError: there is no channel left to report it on,
    so it must abort the run.
    """
