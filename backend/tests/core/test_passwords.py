"""Password Hashing — salted digests and constant-time verification."""

from app.core.passwords import hash_password, verify_password


def test_hash_is_salted():
    assert hash_password("secret", 1000) != hash_password("secret", 1000)


def test_verify_accepts_correct_password():
    stored = hash_password("secret", 1000)
    assert verify_password("secret", stored)
    assert not verify_password("Secret", stored)


def test_verify_rejects_malformed_hash():
    assert not verify_password("secret", "plain-text")
    assert not verify_password("secret", "md5$1$salt$digest")


def test_stored_format():
    algorithm, iterations, salt, digest = hash_password("x", 1000, salt="abc").split("$")
    assert (algorithm, iterations, salt) == ("pbkdf2_sha256", "1000", "abc")
    assert len(digest) == 64
