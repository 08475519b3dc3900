import hashlib
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from gdriveupload.errors import LocalFileNotFoundError
from gdriveupload.models import LocalFile


class TestLocalFile(unittest.TestCase):
    def test_from_path_reads_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "build.zip"
            path.write_bytes(b"zipdata")

            local = LocalFile.from_path(str(path))

            self.assertEqual(local.name, "build.zip")
            self.assertEqual(local.size, 7)
            self.assertEqual(local.mime_type, "application/zip")
            self.assertEqual(local.md5_checksum, hashlib.md5(b"zipdata").hexdigest())

    def test_from_path_missing(self) -> None:
        with self.assertRaises(LocalFileNotFoundError) as ctx:
            LocalFile.from_path("/definitely/not/here.zip")
        self.assertEqual(ctx.exception.details["path"], "/definitely/not/here.zip")

    def test_from_path_unreadable_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "locked.zip"
            path.write_bytes(b"x")

            with patch(
                "gdriveupload.models.local_file.md5_checksum",
                side_effect=PermissionError(13, "Permission denied"),
            ):
                with self.assertRaises(LocalFileNotFoundError) as ctx:
                    LocalFile.from_path(str(path))

        self.assertIsInstance(ctx.exception.cause, OSError)
        self.assertEqual(ctx.exception.details["path"], str(path))

    def test_from_path_directory_is_not_a_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(LocalFileNotFoundError):
                LocalFile.from_path(tmp)


if __name__ == "__main__":
    unittest.main()
