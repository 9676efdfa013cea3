"""
Tests for IdentityService, called directly with explicit sessions.
"""
import pytest

from marketplace.core.errors import AuthRequired, Conflict, NotFound, ValidationError
from marketplace.core.sessions import SessionData, SessionStore
from marketplace.db.models import User, UserSession
from marketplace.schemas.auth import LoginRequest, RegisterRequest
from marketplace.services.identity import IdentityService


@pytest.fixture
def identity(db):
	return IdentityService(db, SessionStore(db))


def test_register_assigns_id(identity):
	user = identity.register(RegisterRequest(username="ann", password="secret1"))
	assert len(user.id) == 32
	assert user.username == "ann"


def test_register_does_not_store_plaintext(identity, db):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	stored = db.query(User).filter(User.username == "ann").one()
	assert stored.password_hash != "secret1"


def test_register_short_password(identity):
	with pytest.raises(ValidationError):
		identity.register(RegisterRequest(username="ann", password="12345"))


def test_register_password_of_exactly_six(identity):
	assert identity.register(RegisterRequest(username="ann", password="123456")).id


def test_register_duplicate_is_conflict(identity, db):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	with pytest.raises(Conflict):
		identity.register(RegisterRequest(username="ann", password="another1"))
	assert db.query(User).count() == 1


def test_register_duplicate_across_sessions(session_factory):
	# Two independent units of work, as two concurrent requests would have.
	first, second = session_factory(), session_factory()
	try:
		IdentityService(first, SessionStore(first)).register(RegisterRequest(username="ann", password="secret1"))
		with pytest.raises(Conflict):
			IdentityService(second, SessionStore(second)).register(RegisterRequest(username="ann", password="secret2"))
	finally:
		first.close()
		second.close()


def test_usernames_are_case_sensitive(identity):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	assert identity.register(RegisterRequest(username="Ann", password="secret1")).id


def test_login_creates_session(identity):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	session = identity.login(LoginRequest(username="ann", password="secret1"))
	assert session.username == "ann"


@pytest.mark.parametrize("username,password", [("ann", "wrong12"), ("bob", "secret1")])
def test_login_bad_credentials(identity, username, password):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	with pytest.raises(AuthRequired):
		identity.login(LoginRequest(username=username, password=password))


def test_login_replaces_current_session(identity, db):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	old = identity.login(LoginRequest(username="ann", password="secret1"))
	new = identity.login(LoginRequest(username="ann", password="secret1"), old)

	assert new.token != old.token
	assert db.query(UserSession).filter(UserSession.token == old.token).first() is None


def test_logout_without_session(identity):
	identity.logout(None)


def test_profile_requires_session(identity):
	with pytest.raises(AuthRequired):
		identity.get_profile(None)


def test_profile_for_vanished_user(identity):
	with pytest.raises(AuthRequired):
		identity.get_profile(SessionData(token="t", username="ghost"))


def test_delete_account(identity, db):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	session = identity.login(LoginRequest(username="ann", password="secret1"))

	identity.delete_account(session)

	assert db.query(User).count() == 0
	assert db.query(UserSession).count() == 0


def test_delete_account_twice(identity):
	identity.register(RegisterRequest(username="ann", password="secret1"))
	session = identity.login(LoginRequest(username="ann", password="secret1"))
	identity.delete_account(session)

	with pytest.raises(NotFound):
		identity.delete_account(session)


def test_delete_account_requires_session(identity):
	with pytest.raises(AuthRequired):
		identity.delete_account(None)
