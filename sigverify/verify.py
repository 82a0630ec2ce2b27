import logging
from . import _hex, _sha256
from ._format import SignatureFormat, classify
from .errors import SignatureError, InvalidSignatureFormat, InvalidPublicKeyFormat
from .secp256k1 import COMPRESSED_PUBLIC_KEY_LENGTH


__all__ = ["SignatureVerifier"]

logger = logging.getLogger(__name__)

COMPRESSED_PREFIXES = (0x02, 0x03)


class SignatureVerifier:
    def __init__(self, backend):
        self._backend = backend


    def _decode_public_key(self, public_key_hex):
        public_key = _hex.decode(public_key_hex)
        if len(public_key) != COMPRESSED_PUBLIC_KEY_LENGTH:
            raise InvalidPublicKeyFormat("Public key must be 33 bytes (compressed format)")
        if public_key[0] not in COMPRESSED_PREFIXES:
            raise InvalidPublicKeyFormat("Public key must start with 0x02 or 0x03 (compressed format)")
        return public_key


    def verify(self, message, signature_hex, public_key_hex):
        """Check an ECDSA signature over SHA-256(message).

        Returns whether the signature is valid. Raises SignatureError when
        the inputs can't be evaluated at all.
        """

        digest = _sha256.digest(message)

        signature = _hex.decode(signature_hex)
        signature_format = classify(signature)
        if signature_format is SignatureFormat.INVALID:
            raise InvalidSignatureFormat("Raw signature must be exactly 64 bytes")
        logger.debug("Detected %s signature of %d bytes", signature_format.value, len(signature))

        public_key = self._decode_public_key(public_key_hex)

        backend = self._backend
        with backend.context(backend.CONTEXT_VERIFY) as context:
            if signature_format is SignatureFormat.CANONICAL:
                parsed_signature = backend.parse_der_signature(context, signature)
            else:
                parsed_signature = backend.parse_compact_signature(context, signature)
            parsed_public_key = backend.parse_public_key(context, public_key)
            return backend.verify(context, parsed_signature, digest, parsed_public_key)


    def verify_signature(self, message, signature_hex, public_key_hex):
        # Single result channel for scripting hosts: True or False when the
        # signature was evaluated, None when it could not be.
        try:
            return self.verify(message, signature_hex, public_key_hex)
        except SignatureError as e:
            logger.warning("Signature verification failed: %s", e)
            return None
