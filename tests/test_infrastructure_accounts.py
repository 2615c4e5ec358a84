"""
Tests for the accounts adapters.

bcrypt hashing, JWT tokens and the SQLAlchemy user store
against a private in-memory SQLite database.
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
import pytest

from tradehub.domain.accounts.entities import TokenClaims, User
from tradehub.domain.accounts.errors import EmailAlreadyRegisteredError, InvalidTokenError
from tradehub.infrastructure.accounts.jwt_token_service import JwtTokenService
from tradehub.infrastructure.accounts.password_hasher import BcryptPasswordHasher
from tradehub.infrastructure.accounts.user_repository import SqlAlchemyUserRepository
from tradehub.infrastructure.database import build_engine

SECRET = "unit-test-secret-key-with-32-bytes!!"
USER = User(
    id="11111111-2222-3333-4444-555555555555",
    email="jane@example.com",
    password_hash="x",
    full_name="Jane",
    created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
)


class TestBcryptPasswordHasher:
    """Tests for BcryptPasswordHasher."""

    def test_hash_and_verify(self) -> None:
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash("secret1")
        assert hashed != "secret1"
        assert hasher.verify("secret1", hashed)
        assert not hasher.verify("secret2", hashed)

    def test_hashes_are_salted(self) -> None:
        hasher = BcryptPasswordHasher(rounds=4)
        assert hasher.hash("secret1") != hasher.hash("secret1")

    def test_corrupt_hash_does_not_verify(self) -> None:
        assert not BcryptPasswordHasher(rounds=4).verify("secret1", "not-a-bcrypt-hash")

    def test_dummy_verify_reuses_one_hash(self, monkeypatch: pytest.MonkeyPatch) -> None:
        hasher = BcryptPasswordHasher(rounds=4)
        checked: list[bytes] = []
        real_checkpw = bcrypt.checkpw

        def recording_checkpw(password: bytes, hashed: bytes) -> bool:
            checked.append(hashed)
            return real_checkpw(password, hashed)

        monkeypatch.setattr(bcrypt, "checkpw", recording_checkpw)
        hasher.verify_dummy("secret1")
        hasher.verify_dummy("secret2")
        assert len(checked) == 2
        assert checked[0] == checked[1]


class TestJwtTokenService:
    """Tests for JwtTokenService."""

    def test_round_trip(self) -> None:
        service = JwtTokenService(secret=SECRET)
        claims = service.verify(service.issue(USER))
        assert claims == TokenClaims(user_id=USER.id, email=USER.email)

    def test_payload_claims(self) -> None:
        now = datetime.now(timezone.utc) - timedelta(minutes=1)
        token = JwtTokenService(secret=SECRET, clock=lambda: now).issue(USER)
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["userId"] == USER.id
        assert payload["email"] == USER.email
        assert payload["exp"] - payload["iat"] == 24 * 3600

    def test_expired_token_rejected(self) -> None:
        past = datetime.now(timezone.utc) - timedelta(days=2)
        token = JwtTokenService(secret=SECRET, clock=lambda: past).issue(USER)
        with pytest.raises(InvalidTokenError) as exc_info:
            JwtTokenService(secret=SECRET).verify(token)
        assert exc_info.value.reason == "expired"

    def test_wrong_secret_rejected(self) -> None:
        token = JwtTokenService(secret="another-secret-key-with-32-bytes!!").issue(USER)
        with pytest.raises(InvalidTokenError):
            JwtTokenService(secret=SECRET).verify(token)

    def test_garbage_rejected(self) -> None:
        with pytest.raises(InvalidTokenError):
            JwtTokenService(secret=SECRET).verify("not.a.token")

    def test_token_without_identity_rejected(self) -> None:
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "x", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError) as exc_info:
            JwtTokenService(secret=SECRET).verify(token)
        assert exc_info.value.reason == "missing claims"


class TestSqlAlchemyUserRepository:
    """Tests for SqlAlchemyUserRepository on in-memory SQLite."""

    @pytest.fixture
    def repo(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(engine=build_engine("sqlite://"))

    def test_create_and_fetch(self, repo: SqlAlchemyUserRepository) -> None:
        created = repo.create("jane@example.com", "hash", "Jane")
        by_id = repo.get_by_id(created.id)
        by_email = repo.get_by_email("jane@example.com")
        assert by_id == by_email
        assert by_id is not None
        assert by_id.full_name == "Jane"
        assert by_id.created_at.tzinfo is not None

    def test_unknown_user(self, repo: SqlAlchemyUserRepository) -> None:
        assert repo.get_by_id("missing") is None
        assert repo.get_by_email("missing@example.com") is None

    def test_duplicate_email(self, repo: SqlAlchemyUserRepository) -> None:
        repo.create("jane@example.com", "hash", "Jane")
        with pytest.raises(EmailAlreadyRegisteredError):
            repo.create("jane@example.com", "hash2", "Other Jane")
