import tempfile
import unittest
from pathlib import Path

from fake_drive import FakeDrive

from gdriveupload.executor import TransferExecutor
from gdriveupload.models import LocalFile


class TestTransferExecutor(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        path = Path(self._tmp.name) / "a.zip"
        path.write_bytes(b"content")
        self.local = LocalFile.from_path(str(path))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_create_new_returns_created_id(self) -> None:
        drive = FakeDrive()
        file_id = TransferExecutor(drive).create_new("FOLDER", self.local)
        self.assertEqual([m.file_id for m in drive.named("a.zip")], [file_id])

    def test_update_in_place_returns_same_id(self) -> None:
        drive = FakeDrive()
        existing = drive.add_remote("a.zip", md5="old")

        file_id = TransferExecutor(drive).update_in_place(existing, self.local)

        self.assertEqual(file_id, existing)
        self.assertEqual(drive.named("a.zip")[0].md5_checksum, self.local.md5_checksum)

    def test_purge_duplicates_is_best_effort(self) -> None:
        drive = FakeDrive()
        ids = [drive.add_remote("a.zip") for _ in range(3)]
        drive.fail_delete.add(ids[1])

        with self.assertLogs("gdriveupload.executor", level="WARNING") as logs:
            deleted = TransferExecutor(drive).purge_duplicates(ids)

        self.assertEqual(deleted, [ids[0], ids[2]])
        self.assertEqual(drive.call_names().count("delete_permanently"), 3)
        self.assertIn(ids[1], "\n".join(logs.output))


if __name__ == "__main__":
    unittest.main()
