import unittest

import gdrivekit


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(gdrivekit, "GoogleDrive"))
        self.assertTrue(hasattr(gdrivekit, "DriveClient"))
        self.assertTrue(hasattr(gdrivekit, "AuthInfo"))
        self.assertTrue(hasattr(gdrivekit, "AuthManager"))
        self.assertTrue(hasattr(gdrivekit, "TokenStore"))

        self.assertTrue(hasattr(gdrivekit, "QueryBuilder"))
        self.assertTrue(hasattr(gdrivekit, "ListRequest"))
        self.assertTrue(hasattr(gdrivekit, "FileResource"))
        self.assertTrue(hasattr(gdrivekit, "FileList"))

        self.assertTrue(hasattr(gdrivekit, "GDriveKitError"))
        self.assertTrue(hasattr(gdrivekit, "InvalidStateError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(gdrivekit, "__all__"))
        self.assertIn("GoogleDrive", gdrivekit.__all__)
        self.assertIn("GDriveKitError", gdrivekit.__all__)
        for name in gdrivekit.__all__:
            self.assertTrue(hasattr(gdrivekit, name), name)


if __name__ == "__main__":
    unittest.main()
