"""
Tests for salted bcrypt password hashing.
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from auth.password import generate_salt, hash_password, verify_password

# bcrypt takes at most 72 bytes and no NUL; 18 chars * 4 bytes stays inside that.
passwords = st.text(
    alphabet=st.characters(exclude_characters="\x00"),
    min_size=1,
    max_size=18,
)

FAST_SALT = generate_salt(rounds=4)


class TestPasswordHasher:
    def test_salts_are_fresh(self):
        assert generate_salt(rounds=4) != generate_salt(rounds=4)

    def test_hash_is_deterministic(self):
        assert hash_password("secret1", FAST_SALT) == hash_password("secret1", FAST_SALT)

    def test_same_password_different_salt(self):
        other = generate_salt(rounds=4)
        assert hash_password("secret1", FAST_SALT) != hash_password("secret1", other)

    def test_digest_does_not_contain_password(self):
        assert "secret1" not in hash_password("secret1", FAST_SALT)

    def test_overlong_password_never_verifies(self):
        digest = hash_password("x" * 72, FAST_SALT)
        assert verify_password("x" * 73, FAST_SALT, digest) is False

    def test_malformed_salt_does_not_verify(self):
        digest = hash_password("secret1", FAST_SALT)
        assert verify_password("secret1", "not-a-salt", digest) is False

    @settings(max_examples=25, deadline=None)
    @given(passwords)
    def test_verify_accepts_own_hash(self, password):
        assert verify_password(password, FAST_SALT, hash_password(password, FAST_SALT))

    @settings(max_examples=25, deadline=None)
    @given(passwords, passwords)
    def test_verify_rejects_other_password(self, password, other):
        assume(password != other)
        digest = hash_password(password, FAST_SALT)
        assert not verify_password(other, FAST_SALT, digest)
