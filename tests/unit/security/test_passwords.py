"""Unit tests for password hashing and verification."""

from __future__ import annotations

import asyncio

import bcrypt
import pytest

from credkit.config import HashingSettings
from credkit.kernel.errors import InternalServerError, InvalidArgumentError
from credkit.security.passwords import (
    BcryptPasswordHasher,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


def cost_of(hashed: str) -> int:
    # $2b$<cost>$<salt+digest>
    return int(hashed.split("$")[2])


class CountingProvider:
    def __init__(self, *settings: HashingSettings) -> None:
        self._settings = list(settings)
        self.calls = 0

    def __call__(self) -> HashingSettings:
        value = self._settings[min(self.calls, len(self._settings) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def hasher(fast_hashing_settings: HashingSettings) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(lambda: fast_hashing_settings)


class TestHash:
    def test_returns_self_describing_bcrypt_string(self, hasher: BcryptPasswordHasher) -> None:
        hashed = hasher.hash("Password123!")
        assert hashed.startswith("$2b$04$")
        assert len(hashed) == 60

    def test_salt_differs_per_call(self, hasher: BcryptPasswordHasher) -> None:
        assert hasher.hash("same-password") != hasher.hash("same-password")

    def test_hash_is_not_plaintext(self, hasher: BcryptPasswordHasher) -> None:
        assert "Password123!" not in hasher.hash("Password123!")

    def test_unicode_password(self, hasher: BcryptPasswordHasher) -> None:
        hashed = hasher.hash("pässwörd-密码")
        assert hasher.verify("pässwörd-密码", hashed) is True

    def test_whitespace_only_password_is_accepted(self, hasher: BcryptPasswordHasher) -> None:
        assert hasher.verify("   ", hasher.hash("   ")) is True

    @pytest.mark.parametrize("bad", [None, "", b"bytes", 123, ["pw"]])
    def test_rejects_malformed_input(self, bad: object) -> None:
        provider = CountingProvider(HashingSettings(bcrypt_rounds=4))
        with pytest.raises(InvalidArgumentError) as exc_info:
            BcryptPasswordHasher(provider).hash(bad)  # type: ignore[arg-type]
        assert exc_info.value.message == "Password must be a non-empty string"
        assert isinstance(exc_info.value, InternalServerError)
        assert provider.calls == 0

    def test_73_byte_password_rejected_before_hashing(self) -> None:
        provider = CountingProvider(HashingSettings(bcrypt_rounds=4))
        with pytest.raises(InvalidArgumentError) as exc_info:
            BcryptPasswordHasher(provider).hash("a" * 72 + "X")
        assert exc_info.value.message == "Password must be at most 72 bytes"
        assert provider.calls == 0

    def test_limit_counts_utf8_bytes(self, hasher: BcryptPasswordHasher) -> None:
        # 37 two-byte characters are 74 bytes.
        with pytest.raises(InvalidArgumentError):
            hasher.hash("\u00e9" * 37)

    def test_exactly_72_bytes_accepted(self, hasher: BcryptPasswordHasher) -> None:
        password = "a" * 72
        stored = hasher.hash(password)
        assert hasher.verify(password, stored) is True
        assert hasher.verify("a" * 71 + "b", stored) is False

    def test_unencodable_password_rejected(self, hasher: BcryptPasswordHasher) -> None:
        with pytest.raises(InvalidArgumentError, match="valid Unicode"):
            hasher.hash("pw\ud800")

    def test_primitive_failure_is_classified(
        self, hasher: BcryptPasswordHasher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken_gensalt(*args, **kwargs):
            raise OSError("getrandom() failed: ENOSYS")

        monkeypatch.setattr(bcrypt, "gensalt", broken_gensalt)
        with pytest.raises(InternalServerError) as exc_info:
            hasher.hash("Password123!")
        err = exc_info.value
        assert type(err) is InternalServerError
        assert err.message == "Failed to hash password"
        assert "getrandom" not in str(err)

    def test_settings_failure_is_classified(self) -> None:
        def provider() -> HashingSettings:
            return HashingSettings(bcrypt_rounds=2)

        with pytest.raises(InternalServerError, match="Failed to hash password"):
            BcryptPasswordHasher(provider).hash("Password123!")


class TestCostFactor:
    def test_provider_read_on_every_call(self) -> None:
        provider = CountingProvider(
            HashingSettings(production=False, bcrypt_rounds=4),
            HashingSettings(production=True, bcrypt_rounds=4),
        )
        h = BcryptPasswordHasher(provider)
        first, second = h.hash("pw"), h.hash("pw")
        assert provider.calls == 2
        assert cost_of(first) == 4
        assert cost_of(second) == 6

    def test_production_flag_raises_cost(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREDKIT_BCRYPT_ROUNDS", "4")
        monkeypatch.delenv("CREDKIT_PRODUCTION_ROUNDS_OFFSET", raising=False)
        monkeypatch.delenv("CREDKIT_PRODUCTION", raising=False)
        dev = hash_password("Password123!")
        monkeypatch.setenv("CREDKIT_PRODUCTION", "true")
        prod = hash_password("Password123!")
        assert cost_of(prod) > cost_of(dev)
        assert cost_of(prod) - cost_of(dev) == 2

    def test_default_costs(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("CREDKIT_BCRYPT_ROUNDS", "CREDKIT_PRODUCTION_ROUNDS_OFFSET"):
            monkeypatch.delenv(key, raising=False)
        monkeypatch.setenv("CREDKIT_PRODUCTION", "false")
        assert BcryptPasswordHasher().cost_factor() == 10
        monkeypatch.setenv("CREDKIT_PRODUCTION", "true")
        assert BcryptPasswordHasher().cost_factor() == 12


class TestVerify:
    def test_scenario(self, hasher: BcryptPasswordHasher) -> None:
        stored = hasher.hash("Password123!")
        assert stored
        assert hasher.verify("Password123!", stored) is True
        assert hasher.verify("WrongPassword", stored) is False

    def test_near_miss_is_false(self, hasher: BcryptPasswordHasher) -> None:
        stored = hasher.hash("Password123!")
        assert hasher.verify("Password123", stored) is False
        assert hasher.verify("password123!", stored) is False

    def test_verifies_hash_made_at_other_cost(self, hasher: BcryptPasswordHasher) -> None:
        stored = BcryptPasswordHasher(lambda: HashingSettings(production=True, bcrypt_rounds=4)).hash("pw")
        assert cost_of(stored) == 6
        assert hasher.verify("pw", stored) is True

    def test_verify_password_needs_no_settings(self, hasher: BcryptPasswordHasher) -> None:
        assert verify_password("pw", hasher.hash("pw")) is True

    def test_overlong_candidate_is_false(self, hasher: BcryptPasswordHasher) -> None:
        stored = hasher.hash("Password123!")
        assert hasher.verify("x" * 100, stored) is False

    def test_overlong_candidate_never_matches_72_byte_prefix(
        self, hasher: BcryptPasswordHasher
    ) -> None:
        stored = hasher.hash("a" * 72)
        assert hasher.verify("a" * 72 + "Y", stored) is False

    def test_overlong_candidate_with_malformed_hash_still_raises(self) -> None:
        with pytest.raises(InternalServerError) as exc_info:
            verify_password("x" * 100, "not-a-hash")
        assert exc_info.value.message == "Failed to verify password"

    @pytest.mark.parametrize(
        "password,hashed",
        [("", "$2b$04$abc"), ("pw", ""), (None, "$2b$04$abc"), ("pw", None), ("pw", b"$2b$")],
    )
    def test_missing_argument_raises_not_false(self, password: object, hashed: object) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            verify_password(password, hashed)  # type: ignore[arg-type]
        assert exc_info.value.message == "Both password and hashed password must be provided"

    @pytest.mark.parametrize(
        "hashed",
        [
            "not-a-hash",
            "$argon2id$v=19$m=65536,t=3,p=4$c29tZXNhbHQ$RdescudvJCsgt3ub+b+dWRWJTmaaJObG",
            "$2b$04$tooshort",
        ],
    )
    def test_malformed_hash_is_classified_error(self, hashed: str) -> None:
        with pytest.raises(InternalServerError) as exc_info:
            verify_password("Password123!", hashed)
        assert type(exc_info.value) is InternalServerError
        assert exc_info.value.message == "Failed to verify password"


class TestAsync:
    def test_round_trip(self, fast_hashing_settings: HashingSettings) -> None:
        async def run() -> tuple[bool, bool]:
            stored = await hash_password_async(
                "Password123!", settings_provider=lambda: fast_hashing_settings
            )
            return (
                await verify_password_async("Password123!", stored),
                await verify_password_async("WrongPassword", stored),
            )

        assert asyncio.run(run()) == (True, False)

    def test_concurrent_hashes_are_distinct(self, fast_hashing_settings: HashingSettings) -> None:
        async def run() -> list[str]:
            return await asyncio.gather(*[
                hash_password_async("same", settings_provider=lambda: fast_hashing_settings)
                for _ in range(5)
            ])

        results = asyncio.run(run())
        assert len(set(results)) == 5

    def test_errors_propagate(self) -> None:
        with pytest.raises(InvalidArgumentError):
            asyncio.run(hash_password_async(""))
