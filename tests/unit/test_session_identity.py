import jwt

from promptlab.services.identity import SessionIdentity
from tests.fakes import make_token
from tests.test_template import TestTemplate


class TestSessionIdentity(TestTemplate):
    def test_not_loaded_until_resolved(self):
        identity = SessionIdentity()
        assert not identity.is_loaded
        assert not identity.is_signed_in
        assert identity.get_token() is None

    def test_signed_in_with_valid_token(self):
        token = make_token(sub="user_42", email="u42@example.com")
        identity = SessionIdentity(token)

        assert identity.is_loaded
        assert identity.is_signed_in
        assert identity.get_token() == token
        assert identity.user.id == "user_42"
        assert identity.user.email == "u42@example.com"

    def test_resolved_without_token_is_signed_out(self):
        identity = SessionIdentity()
        identity.resolve(None)
        assert identity.is_loaded
        assert not identity.is_signed_in
        assert identity.user is None

    def test_expired_token_is_signed_out(self):
        identity = SessionIdentity(make_token(ttl=-60))
        assert identity.is_loaded
        assert not identity.is_signed_in
        assert identity.get_token() is None

    def test_token_without_subject_is_signed_out(self):
        token = jwt.encode({"email": "x@example.com"}, "s", algorithm="HS256")
        assert not SessionIdentity(token).is_signed_in

    def test_garbage_token_is_signed_out(self):
        identity = SessionIdentity("not-a-jwt")
        assert identity.is_loaded
        assert not identity.is_signed_in

    def test_sign_out(self):
        identity = SessionIdentity(make_token())
        identity.sign_out()
        assert identity.is_loaded
        assert not identity.is_signed_in

    def test_from_config_without_session_token(self, monkeypatch):
        from common import global_config

        monkeypatch.setattr(global_config, "SESSION_TOKEN", None)
        identity = SessionIdentity.from_config()
        assert identity.is_loaded
        assert not identity.is_signed_in
