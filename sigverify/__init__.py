from . import library, secp256k1
from .errors import *
from .errors import __all__ as _errors_all
from .verify import SignatureVerifier
from .recover import KeyRecoverer

__all__ = ["verify_signature", "recover_public_key", "SignatureVerifier", "KeyRecoverer"] + _errors_all

ffi, lib = library.discover_library()
backend = secp256k1.Secp256k1Backend(ffi, lib)

verifier = SignatureVerifier(backend)
recoverer = KeyRecoverer(backend)
verify_signature, recover_public_key = verifier.verify_signature, recoverer.recover
