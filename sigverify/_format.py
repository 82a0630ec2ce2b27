import enum


__all__ = ["SignatureFormat", "classify"]

DER_SEQUENCE = 0x30
DER_INTEGER = 0x02
DER_MIN_LENGTH = 7
COMPACT_LENGTH = 64


class SignatureFormat(enum.Enum):
    CANONICAL = "der"
    COMPACT = "compact"
    INVALID = "invalid"


def _is_der(data):
    # Structural check only: SEQUENCE, length, INTEGER, ..., INTEGER.
    # libsecp256k1 does the real parsing.
    if len(data) < DER_MIN_LENGTH or data[0] != DER_SEQUENCE:
        return False
    if data[1] > len(data) - 2:
        return False
    if data[2] != DER_INTEGER:
        return False
    second_integer = 4 + data[3]
    if second_integer >= len(data) or data[second_integer] != DER_INTEGER:
        return False
    return True


def classify(data):
    if _is_der(data):
        return SignatureFormat.CANONICAL
    elif len(data) == COMPACT_LENGTH:
        return SignatureFormat.COMPACT
    else:
        return SignatureFormat.INVALID
