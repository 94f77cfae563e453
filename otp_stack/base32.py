from __future__ import annotations

from .errors import EmptyInputError, InvalidCharacterError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD = "="

_VALUES: dict[str, int] = {char: index for index, char in enumerate(ALPHABET)}
_VALUES.update({char.lower(): index for char, index in list(_VALUES.items())})


def decode(text: str) -> bytes:
    """
    Decode an RFC 4648 base32 string into raw secret bytes.

    Lower-case input, spaces and missing padding are accepted. Padding may only
    trail the data. Leftover bits that do not fill a byte are dropped.
    """
    # Positions in errors refer to the text as typed, so strip without reindexing.
    data = text.rstrip().rstrip(PAD)
    start = len(data) - len(data.lstrip())

    out = bytearray()
    buffer = 0
    bits = 0
    seen = 0
    for position in range(start, len(data)):
        char = data[position]
        # Authenticator apps display secrets in groups of four, users paste them as-is.
        if char == " ":
            continue
        seen += 1
        value = _VALUES.get(char)
        if value is None:
            raise InvalidCharacterError(char, position)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    if not seen:
        raise EmptyInputError("Base32 secret is empty")
    return bytes(out)


def encode(data: bytes, padding: bool = True) -> str:
    out: list[str] = []
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append(ALPHABET[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1
    if bits:
        out.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])
    if padding:
        out.append(PAD * (-len(out) % 8))
    return "".join(out)
