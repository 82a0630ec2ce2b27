__all__ = [
    "SignatureError", "InvalidHex", "InvalidSignatureFormat", "LengthError",
    "InvalidSignatureLength", "InvalidMessageHashLength",
    "InvalidPublicKeyFormat", "SignatureParseError", "PublicKeyParseError",
    "InvalidRecoveryId", "RecoveryFailed", "ContextCreationFailed", "ContextDestroyed",
    "AllocationFailure"
]


class SignatureError(ValueError):
    pass


class InvalidHex(SignatureError):
    pass


class InvalidSignatureFormat(SignatureError):
    pass


class LengthError(SignatureError):
    pass


class InvalidSignatureLength(LengthError):
    pass


class InvalidMessageHashLength(LengthError):
    pass


class InvalidPublicKeyFormat(SignatureError):
    pass


class SignatureParseError(SignatureError):
    pass


class PublicKeyParseError(SignatureError):
    pass


class InvalidRecoveryId(SignatureError):
    pass


class RecoveryFailed(SignatureError):
    pass


class ContextCreationFailed(SignatureError):
    pass


class ContextDestroyed(SignatureError):
    pass


class AllocationFailure(SignatureError):
    pass
