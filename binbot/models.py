from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CodedToken:
    date_code: str  # 4 chars, base 36
    bin_code: str   # 1 char


@dataclass(frozen=True)
class BinLabel:
    """
    Either a known bin (name set) or an unknown code (name is None).
    Text formatting happens in __str__ so callers can match on the value.
    """
    code: str
    name: str | None = None

    @property
    def known(self) -> bool:
        return self.name is not None

    def __str__(self) -> str:
        if self.known:
            return self.name
        return f"Unknown Bin '{self.code}'"


@dataclass(frozen=True)
class ScheduleEntry:
    date: date
    bin: BinLabel

    @property
    def label(self) -> str:
        return str(self.bin)
