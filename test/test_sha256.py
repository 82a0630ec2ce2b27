import hashlib
import pytest
from sigverify import _sha256


VECTORS = [
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (
        b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
        "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
    ),
    (
        b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmnhijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu",
        "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1"
    )
]


@pytest.mark.parametrize("message,expected", VECTORS, ids=["empty", "abc", "448-bit", "896-bit"])
def test_vectors(message, expected):
    assert _sha256.digest(message).hex() == expected


def test_million_a():
    assert _sha256.digest(b"a" * 1000000).hex() == "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0"


def test_padding_boundaries():
    # 55, 56, 63 and 64 bytes sit on both sides of the length-field boundary
    for length in range(0, 200):
        message = bytes(i % 251 for i in range(length))
        digest = _sha256.digest(message)
        assert len(digest) == _sha256.DIGEST_LENGTH
        assert digest == hashlib.sha256(message).digest()


def test_text_is_hashed_as_utf8():
    assert _sha256.digest("Hello, world!") == hashlib.sha256(b"Hello, world!").digest()
    assert _sha256.digest("привет") == hashlib.sha256("привет".encode("utf-8")).digest()


def test_bytearray():
    assert _sha256.digest(bytearray(b"abc")) == _sha256.digest(b"abc")


def test_lone_surrogate():
    assert _sha256.digest("\ud800") == hashlib.sha256("\ud800".encode("utf-8", "surrogatepass")).digest()
