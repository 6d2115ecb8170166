"""Service-level tests for kodbank.services.accounts (no HTTP layer)."""

import unittest
from datetime import timezone
from decimal import Decimal

import jwt
from sqlalchemy.orm import sessionmaker

from kodbank.core.config import get_settings
from kodbank.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from kodbank.core.security import verify_token
from kodbank.models import SessionToken
from kodbank.schemas.auth import LoginRequest, RegisterRequest
from kodbank.services import accounts
from tests.support import make_engine


class AccountsServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = make_engine()
        self.db = sessionmaker(bind=self.engine)()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def _register(self, username: str = "alice", email: str = "alice@example.com"):
        return accounts.register_account(
            self.db,
            RegisterRequest(username=username, email=email, password="secret123"),
        )


class TestRegisterAccount(AccountsServiceTestCase):
    def test_defaults(self) -> None:
        account = self._register()
        self.assertIsNotNone(account.id)
        self.assertEqual(account.balance, Decimal("100000.00"))
        self.assertEqual(account.role, "customer")
        self.assertIsNone(account.phone)

    def test_conflict_leaves_session_usable(self) -> None:
        self._register()
        with self.assertRaises(ConflictError):
            self._register(email="second@example.com")
        # rollback happened; a different account can still be created
        self.assertEqual(self._register("bob", "bob@example.com").username, "bob")


class TestLoginService(AccountsServiceTestCase):
    def test_login_issues_verifiable_token(self) -> None:
        account = self._register()
        settings = get_settings()
        session = accounts.login(self.db, LoginRequest(username="alice", password="secret123"), settings)
        claims = verify_token(session.token, settings)
        self.assertEqual(claims.subject, "alice")
        self.assertEqual(claims.account_id, account.id)
        self.assertEqual(claims.role, "customer")
        row = self.db.query(SessionToken).one()
        self.assertEqual(row.token, session.token)

    def test_recorded_expiry_matches_token_exp(self) -> None:
        self._register()
        settings = get_settings()
        session = accounts.login(self.db, LoginRequest(username="alice", password="secret123"), settings)
        payload = jwt.decode(
            session.token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
        self.assertEqual(payload["exp"], int(session.expiry.timestamp()))
        self.assertEqual(payload["exp"] - payload["iat"], settings.SESSION_TTL_MINUTES * 60)
        row = self.db.query(SessionToken).one()
        # SQLite hands back naive UTC datetimes
        self.assertEqual(row.expiry.replace(tzinfo=timezone.utc), session.expiry)

    def test_unknown_user_and_wrong_password_are_identical(self) -> None:
        self._register()
        errors = []
        for username, password in (("alice", "nope"), ("ghost", "secret123")):
            with self.assertRaises(InvalidCredentialsError) as ctx:
                accounts.authenticate(self.db, username, password)
            errors.append((type(ctx.exception), ctx.exception.message, ctx.exception.status_code))
        self.assertEqual(errors[0], errors[1])


class TestGetBalance(AccountsServiceTestCase):
    def test_returns_balance(self) -> None:
        account = self._register()
        self.assertEqual(accounts.get_balance(self.db, account.id), Decimal("100000.00"))

    def test_missing_account(self) -> None:
        with self.assertRaises(NotFoundError):
            accounts.get_balance(self.db, 999)


if __name__ == "__main__":
    unittest.main()
