from .errors import InvalidHex


__all__ = ["decode", "encode"]

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode(text):
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError:
            raise InvalidHex("Hex string must be ASCII") from None
    if not isinstance(text, str):
        raise TypeError("Expected hex string, got {}".format(type(text).__name__))

    if len(text) % 2 != 0:
        raise InvalidHex("Hex string has odd length {}".format(len(text)))
    # bytes.fromhex() skips whitespace, so check every character first
    for pos, char in enumerate(text):
        if char not in HEX_DIGITS:
            raise InvalidHex("Invalid hex character {!r} at position {}".format(char, pos))
    return bytes.fromhex(text)


def encode(data):
    return bytes(data).hex()
