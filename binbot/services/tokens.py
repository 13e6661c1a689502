from binbot.errors import AddressNotFoundError, MalformedLengthError, MalformedLineError
from binbot.models import CodedToken

TOKEN_WIDTH = 5
LENGTH_ERROR = "Coded String length not a multiple of 5"


def split_token(chunk: str) -> CodedToken:
    # first four chars are the encoded date, the fifth is the bin letter
    if len(chunk) != TOKEN_WIDTH:
        raise MalformedLengthError(LENGTH_ERROR)
    return CodedToken(date_code=chunk[:4], bin_code=chunk[4])


def tokenize(coded_run: str) -> list[CodedToken]:
    if len(coded_run) % TOKEN_WIDTH:
        raise MalformedLengthError(LENGTH_ERROR)

    return [
        split_token(coded_run[i:i + TOKEN_WIDTH])
        for i in range(0, len(coded_run), TOKEN_WIDTH)
    ]


def tokenize_line(line: str) -> list[CodedToken]:
    fields = line.split(",")
    if len(fields) < 2:
        raise MalformedLineError("Failed to split on ','")
    return tokenize(fields[1])


def find_address_line(raw_text: str, address_key: str) -> str:
    # only "\n" ends a record; other separators stay in the line and fail decoding
    for line in raw_text.split("\n"):
        line = line.removesuffix("\r")
        if line.startswith(address_key):
            return line
    raise AddressNotFoundError(address_key)


def locate_and_tokenize(raw_text: str, address_key: str) -> list[CodedToken]:
    """
    Picks the first line starting with address_key (case-sensitive) and
    splits its second comma field into 5-char coded tokens, in order.
    """
    return tokenize_line(find_address_line(raw_text, address_key))
