import logging
from .errors import (
    AllocationFailure, ContextCreationFailed, SignatureParseError,
    PublicKeyParseError, RecoveryFailed, InvalidRecoveryId,
    InvalidMessageHashLength, ContextDestroyed
)


logger = logging.getLogger(__name__)

COMPACT_SIGNATURE_LENGTH = 64
DIGEST_LENGTH = 32
COMPRESSED_PUBLIC_KEY_LENGTH = 33
UNCOMPRESSED_PUBLIC_KEY_LENGTH = 65


def _context_flag(lib, name):
    # libsecp256k1 0.2+ (coincurve 19+) dropped the VERIFY and SIGN flags,
    # every context can do both
    flag = getattr(lib, name, None)
    if flag is None:
        return lib.SECP256K1_CONTEXT_NONE
    return flag


class Context:
    """A libsecp256k1 context owned by exactly one call.

    Destroyed when the ``with`` block exits, or earlier by ``destroy()``.
    Destroying twice is a no-op.
    """

    def __init__(self, ffi, lib, flags):
        self.ffi = ffi
        self.lib = lib
        self.flags = flags
        self.ctx = lib.secp256k1_context_create(flags)
        if self.ctx == ffi.NULL:
            self.ctx = None
            raise ContextCreationFailed("Failed to create secp256k1 context")
        logger.debug("Created secp256k1 context with flags %#x", flags)


    def destroy(self):
        if self.ctx is None:
            return
        ctx, self.ctx = self.ctx, None
        self.lib.secp256k1_context_destroy(ctx)
        logger.debug("Destroyed secp256k1 context")


    @property
    def destroyed(self):
        return self.ctx is None


    def __enter__(self):
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        self.destroy()


class Secp256k1Backend:
    def __init__(self, ffi, lib):
        self.ffi = ffi
        self.lib = lib

        self.CONTEXT_VERIFY = _context_flag(lib, "SECP256K1_CONTEXT_VERIFY")
        self.CONTEXT_SIGN = _context_flag(lib, "SECP256K1_CONTEXT_SIGN")
        self.EC_COMPRESSED = lib.SECP256K1_EC_COMPRESSED
        self.EC_UNCOMPRESSED = lib.SECP256K1_EC_UNCOMPRESSED


    def context(self, flags):
        return Context(self.ffi, self.lib, flags)


    def _new(self, ctype, init=None):
        try:
            return self.ffi.new(ctype, init)
        except MemoryError:
            raise AllocationFailure("Could not allocate {}".format(ctype)) from None


    def _ctx(self, context):
        if context.destroyed:
            raise ContextDestroyed("secp256k1 context is already destroyed")
        return context.ctx


    def parse_der_signature(self, context, data):
        signature = self._new("secp256k1_ecdsa_signature *")
        if not self.lib.secp256k1_ecdsa_signature_parse_der(self._ctx(context), signature, data, len(data)):
            raise SignatureParseError("Failed to parse DER signature")
        return signature


    def parse_compact_signature(self, context, data):
        if len(data) != COMPACT_SIGNATURE_LENGTH:
            raise SignatureParseError("Raw signature must be exactly 64 bytes")
        signature = self._new("secp256k1_ecdsa_signature *")
        if not self.lib.secp256k1_ecdsa_signature_parse_compact(self._ctx(context), signature, data):
            raise SignatureParseError("Failed to parse raw signature")
        return signature


    def parse_public_key(self, context, data):
        public_key = self._new("secp256k1_pubkey *")
        if not self.lib.secp256k1_ec_pubkey_parse(self._ctx(context), public_key, data, len(data)):
            raise PublicKeyParseError("Failed to parse public key")
        return public_key


    def serialize_public_key(self, context, public_key, compressed=False):
        if compressed:
            length, flag = COMPRESSED_PUBLIC_KEY_LENGTH, self.EC_COMPRESSED
        else:
            length, flag = UNCOMPRESSED_PUBLIC_KEY_LENGTH, self.EC_UNCOMPRESSED
        output = self._new("unsigned char[]", length)
        output_length = self._new("size_t *", length)
        self.lib.secp256k1_ec_pubkey_serialize(self._ctx(context), output, output_length, public_key, flag)
        return bytes(self.ffi.buffer(output, output_length[0]))


    def verify(self, context, signature, digest, public_key):
        if len(digest) != DIGEST_LENGTH:
            raise InvalidMessageHashLength("Expected digest to be {} bytes, got {} bytes".format(DIGEST_LENGTH, len(digest)))
        return self.lib.secp256k1_ecdsa_verify(self._ctx(context), signature, digest, public_key) == 1


    def parse_recoverable_signature(self, context, data, recovery_id):
        # libsecp256k1 aborts the process on an out-of-range id
        if not 0 <= recovery_id <= 3:
            raise InvalidRecoveryId("Invalid recovery id {}".format(recovery_id))
        if len(data) != COMPACT_SIGNATURE_LENGTH:
            raise SignatureParseError("Recoverable signature must be exactly 64 bytes plus recovery id")
        signature = self._new("secp256k1_ecdsa_recoverable_signature *")
        if not self.lib.secp256k1_ecdsa_recoverable_signature_parse_compact(
            self._ctx(context), signature, data, recovery_id
        ):
            raise SignatureParseError("failed to parse signature")
        return signature


    def recover(self, context, signature, digest):
        if len(digest) != DIGEST_LENGTH:
            raise InvalidMessageHashLength("Expected digest to be {} bytes, got {} bytes".format(DIGEST_LENGTH, len(digest)))
        public_key = self._new("secp256k1_pubkey *")
        if not self.lib.secp256k1_ecdsa_recover(self._ctx(context), public_key, signature, digest):
            raise RecoveryFailed("failed to recover public key")
        return public_key
