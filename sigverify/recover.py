import logging
from . import _hex
from .errors import InvalidSignatureLength, InvalidMessageHashLength, InvalidRecoveryId


__all__ = ["KeyRecoverer", "RECOVERY_ID_OFFSET", "MAX_RECOVERY_ID"]

logger = logging.getLogger(__name__)

# Ethereum-style v: 27 + recovery id
RECOVERY_ID_OFFSET = 27
MAX_RECOVERY_ID = 3

SIGNATURE_HEX_LENGTH = 130
MESSAGE_HASH_HEX_LENGTH = 64


class KeyRecoverer:
    def __init__(self, backend):
        self._backend = backend


    def recover(self, signature_hex, message_hash_hex, release_context=False):
        """Recover the uncompressed public key from a 65-byte r || s || v
        signature and a 32-byte digest, both hex-encoded.

        The digest is used as given; nothing is hashed here. Returns the
        65-byte uncompressed key as lowercase hex.
        """

        if len(signature_hex) != SIGNATURE_HEX_LENGTH:
            raise InvalidSignatureLength("signature must be exactly 130 characters")
        if len(message_hash_hex) != MESSAGE_HASH_HEX_LENGTH:
            raise InvalidMessageHashLength("message hash must be exactly 64 characters")

        signature = _hex.decode(signature_hex)
        message_hash = _hex.decode(message_hash_hex)

        recovery_id = signature[64] - RECOVERY_ID_OFFSET
        if not 0 <= recovery_id <= MAX_RECOVERY_ID:
            raise InvalidRecoveryId(
                "invalid recovery id in signature (must be {} to {}, got {})".format(
                    RECOVERY_ID_OFFSET, RECOVERY_ID_OFFSET + MAX_RECOVERY_ID, signature[64]
                )
            )

        logger.debug("Recovering public key with recovery id %d", recovery_id)

        backend = self._backend
        with backend.context(backend.CONTEXT_VERIFY | backend.CONTEXT_SIGN) as context:
            parsed_signature = backend.parse_recoverable_signature(context, signature[:64], recovery_id)
            public_key = backend.recover(context, parsed_signature, message_hash)
            serialized = backend.serialize_public_key(context, public_key, compressed=False)
            if release_context:
                context.destroy()

        return _hex.encode(serialized)
