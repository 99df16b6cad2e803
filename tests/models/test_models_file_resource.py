import unittest
from datetime import datetime, timezone

from gdrivekit.models import FileList, FileResource, file_resource_from_dict
from gdrivekit.util.mime import FOLDER_MIME


class TestFileResource(unittest.TestCase):
    def test_required_fields_and_defaults(self) -> None:
        res = FileResource(id="F1", name="n", mime_type="text/plain")
        self.assertEqual(res.parents, [])
        self.assertIsNone(res.modified_time)
        self.assertFalse(res.trashed)
        self.assertFalse(res.is_folder)
        self.assertFalse(res.is_google_app)

    def test_folder_and_google_app_flags(self) -> None:
        self.assertTrue(FileResource(id="D", name="d", mime_type=FOLDER_MIME).is_folder)
        doc = FileResource(id="G", name="g", mime_type="application/vnd.google-apps.document")
        self.assertTrue(doc.is_google_app)

    def test_from_dict_parses_fields(self) -> None:
        res = file_resource_from_dict(
            {
                "id": "F1",
                "name": "report.pdf",
                "mimeType": "application/pdf",
                "parents": ["P1"],
                "modifiedTime": "2025-01-01T00:00:00.000Z",
                "size": "123",
                "md5Checksum": "abc",
            }
        )
        self.assertEqual(res.id, "F1")
        self.assertEqual(res.parents, ["P1"])
        self.assertEqual(res.size, 123)
        self.assertEqual(res.md5_checksum, "abc")
        self.assertEqual(res.modified_time, datetime(2025, 1, 1, tzinfo=timezone.utc))

    def test_from_dict_tolerates_bad_values(self) -> None:
        res = file_resource_from_dict(
            {"id": 5, "parents": "P1", "modifiedTime": "yesterday", "size": "big"}
        )
        self.assertEqual(res.id, "")
        self.assertEqual(res.name, "")
        self.assertEqual(res.parents, [])
        self.assertIsNone(res.modified_time)
        self.assertIsNone(res.size)


class TestFileList(unittest.TestCase):
    def test_has_more(self) -> None:
        self.assertFalse(FileList().has_more)
        self.assertTrue(FileList(next_page_token="t").has_more)


if __name__ == "__main__":
    unittest.main()
