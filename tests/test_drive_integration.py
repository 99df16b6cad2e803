import argparse
import os
import tempfile
import unittest
from pathlib import Path

from gdrivekit import DriveConfig, GoogleDrive
from gdrivekit.util import timestamp_name


def _env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise unittest.SkipTest(f"Missing env var: {name}")
    return value


class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with real Google Drive.

    Required env vars:
        - GDRIVEKIT_CLIENT_SECRETS: path to OAuth client secrets json
        - GDRIVEKIT_TOKEN_FILE: path to a token json that already holds a refresh token
        - GDRIVEKIT_TEST_ROOT_ID: Drive folder ID used as test root (safe sandbox)

    Optional:
        - GOOGLE_DRIVE_SCOPES: comma-separated scopes (default: full drive)
    """

    @classmethod
    def setUpClass(cls) -> None:
        cls.client_secrets = _env("GDRIVEKIT_CLIENT_SECRETS")
        cls.token_file = _env("GDRIVEKIT_TOKEN_FILE")
        cls.root_id = _env("GDRIVEKIT_TEST_ROOT_ID")

        config = DriveConfig.from_env()
        cls.drive = GoogleDrive(config, root_folder=cls.root_id)
        cls.client = cls.drive.request_auth_token(cls.client_secrets, cls.token_file)

    def test_folder_upload_download_roundtrip(self) -> None:
        client = self.client

        # 1) work folder under the sandbox root
        folder = client.create_folder(folder_name=timestamp_name("gdrivekit_it"))
        try:
            page = client.list_folders(self.root_id, recursive=False)
            self.assertIn(folder.id, [f.id for f in page.files])

            with tempfile.TemporaryDirectory() as tmp:
                tmp_path = Path(tmp)
                src_file = tmp_path / "hello.txt"
                src_file.write_text("hello from gdrivekit integration test\n", encoding="utf-8")

                # 2) upload from path and from literal content
                uploaded = client.create(src_file, folder.id)
                self.assertEqual(uploaded.name, "hello.txt")
                text = client.write_text_file("inline content", folder.id, "inline.txt")

                files = client.list_files(folder.id, recursive=False).files
                self.assertEqual({f.id for f in files}, {uploaded.id, text.id})

                # 3) download
                result = client.get_file(uploaded, tmp_path / "out")
                self.assertFalse(result.exported)
                self.assertEqual(
                    result.path.read_text(encoding="utf-8"),
                    "hello from gdrivekit integration test\n",
                )

                client.remove_file(uploaded.id)
                client.remove_file(text.id)
        finally:
            client.remove_file(folder.id)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose unittest output",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    unittest.main(verbosity=2 if args.verbose else 1)
