# Pure-Python single-shot SHA-256 (FIPS 180-4)

__all__ = ["digest", "DIGEST_LENGTH"]

DIGEST_LENGTH = 32
BLOCK_LENGTH = 64

MASK = 0xFFFFFFFF

# pylint: disable=line-too-long
K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5, 0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3, 0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc, 0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7, 0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13, 0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3, 0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5, 0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208, 0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2
)

INITIAL_STATE = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19
)
# pylint: enable=line-too-long


def _rotr(x, n):
    return ((x >> n) | (x << (32 - n))) & MASK


def _ch(x, y, z):
    return (x & y) ^ (~x & z)


def _maj(x, y, z):
    return (x & y) ^ (x & z) ^ (y & z)


def _big_sigma0(x):
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def _big_sigma1(x):
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def _small_sigma0(x):
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _small_sigma1(x):
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _pad(message):
    bit_length = len(message) * 8
    padding_length = (55 - len(message)) % BLOCK_LENGTH
    return message + b"\x80" + b"\x00" * padding_length + bit_length.to_bytes(8, "big")


def _compress(state, block):
    w = [int.from_bytes(block[i:i + 4], "big") for i in range(0, BLOCK_LENGTH, 4)]
    for i in range(16, 64):
        w.append((_small_sigma1(w[i - 2]) + w[i - 7] + _small_sigma0(w[i - 15]) + w[i - 16]) & MASK)

    a, b, c, d, e, f, g, h = state
    for i in range(64):
        t1 = (h + _big_sigma1(e) + _ch(e, f, g) + K[i] + w[i]) & MASK
        t2 = (_big_sigma0(a) + _maj(a, b, c)) & MASK
        h = g
        g = f
        f = e
        e = (d + t1) & MASK
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK

    return [(x + y) & MASK for x, y in zip(state, (a, b, c, d, e, f, g, h))]


def digest(message):
    if isinstance(message, str):
        message = message.encode("utf-8", "surrogatepass")
    padded = _pad(bytes(message))

    state = list(INITIAL_STATE)
    for offset in range(0, len(padded), BLOCK_LENGTH):
        state = _compress(state, padded[offset:offset + BLOCK_LENGTH])

    return b"".join(word.to_bytes(4, "big") for word in state)
