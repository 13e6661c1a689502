from binbot.models import BinLabel

BIN_NAMES = {
    "B": "Black Bin",
    "G": "Green Bin",
    "R": "Brown Bin",
}


def bin_label(code: str) -> BinLabel:
    return BinLabel(code=code, name=BIN_NAMES.get(code))


def map_bin_code(code: str) -> str:
    # never fails: unknown letters end up in the notification text
    return str(bin_label(code))
