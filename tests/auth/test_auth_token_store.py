import json
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import Mock

from gdrivekit.auth import Token, TokenStore
from gdrivekit.errors import LocalIOError, NotFoundError, TokenParseError
from gdrivekit.util.time import now_utc, to_epoch_ms


class TestToken(unittest.TestCase):
    def test_expired(self) -> None:
        past = to_epoch_ms(now_utc() - timedelta(hours=1))
        future = to_epoch_ms(now_utc() + timedelta(hours=1))
        self.assertTrue(Token("a", expiry_date=past).expired)
        self.assertFalse(Token("a", expiry_date=future).expired)
        self.assertFalse(Token("a").expired)

    def test_from_dict_requires_access_token(self) -> None:
        with self.assertRaises(TokenParseError):
            Token.from_dict({"refresh_token": "r"})

    def test_from_dict_rejects_non_integer_expiry(self) -> None:
        with self.assertRaises(TokenParseError):
            Token.from_dict({"access_token": "a", "expiry_date": "soon"})

    def test_from_credentials(self) -> None:
        creds = Mock()
        creds.token = "access"
        creds.refresh_token = "refresh"
        creds.expiry = datetime(2025, 1, 1)
        creds.scopes = ["https://www.googleapis.com/auth/drive"]

        token = Token.from_credentials(creds)
        self.assertEqual(token.access_token, "access")
        self.assertEqual(token.refresh_token, "refresh")
        self.assertEqual(token.expiry_date, 1735689600000)
        self.assertEqual(token.scope, "https://www.googleapis.com/auth/drive")

    def test_to_credentials_uses_naive_utc_expiry(self) -> None:
        token = Token("access", "refresh", expiry_date=1735689600000)
        creds = token.to_credentials(
            client_id="id",
            client_secret="secret",
            token_uri="https://oauth2.googleapis.com/token",
            scopes=["https://www.googleapis.com/auth/drive"],
        )
        self.assertEqual(creds.token, "access")
        self.assertEqual(creds.refresh_token, "refresh")
        self.assertEqual(creds.expiry, datetime(2025, 1, 1))
        self.assertTrue(creds.expired)


class TestTokenStore(unittest.TestCase):
    def test_write_then_read_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "token.json"
            token = Token(
                access_token="a",
                refresh_token="r",
                expiry_date=1735689600000,
                token_type="Bearer",
                scope="https://www.googleapis.com/auth/drive",
            )
            TokenStore.write(path, token)
            self.assertEqual(TokenStore.read(path), token)

    def test_written_file_has_expected_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "token.json"
            TokenStore.write(path, Token("a", "r", 1))
            data = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual(data, {"access_token": "a", "refresh_token": "r", "expiry_date": 1})

    def test_read_missing_file(self) -> None:
        with self.assertRaises(NotFoundError):
            TokenStore.read("/nonexistent/token.json")

    def test_read_corrupt_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "token.json"
            path.write_text("not json", encoding="utf-8")
            with self.assertRaises(TokenParseError):
                TokenStore.read(path)

    def test_read_non_object(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "token.json"
            path.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(TokenParseError):
                TokenStore.read(path)

    def test_write_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            # A directory at the target path makes open() fail.
            path = Path(tmp) / "token.json"
            path.mkdir()
            with self.assertRaises(LocalIOError):
                TokenStore.write(path, Token("a"))


if __name__ == "__main__":
    unittest.main()
