import io
import json
import tempfile
import unittest
from contextlib import contextmanager, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from fake_drive import FakeDrive

from gdriveupload.cli import main
from gdriveupload.context import UploadContext
from gdriveupload.errors import AuthenticationError


class TestCliMain(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.file = self.tmp / "a.zip"
        self.file.write_bytes(b"payload")
        self.output = self.tmp / "github_output"
        self.drive = FakeDrive()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _env(self, **overrides):
        env = {
            "INPUT_FILENAME": str(self.file),
            "INPUT_FOLDER_ID": "FOLDER",
            "INPUT_CREDENTIALS": "e30=",
            "GITHUB_OUTPUT": str(self.output),
        }
        env.update(overrides)
        return env

    def _fake_context(self):
        drive = self.drive

        @contextmanager
        def fake_open_context(config):
            yield UploadContext(controller=drive, client_email="uploader@example.com")

        return fake_open_context

    def test_success_writes_outputs(self) -> None:
        with patch("gdriveupload.cli.open_context", self._fake_context()):
            code = main(self._env(INPUT_SHARING="anyone"))

        self.assertEqual(code, 0)
        text = self.output.read_text(encoding="utf-8")
        self.assertIn("file_id=NEW1\n", text)
        self.assertIn("file_name=a.zip\n", text)
        self.assertIn("updated=false\n", text)
        self.assertIn("skipped=false\n", text)
        self.assertIn("web_view_link=https://drive.example/file/NEW1/view\n", text)
        self.assertIn("file_count=1\n", text)

    def test_without_github_output_prints_json(self) -> None:
        env = self._env()
        del env["GITHUB_OUTPUT"]

        out = io.StringIO()
        with patch("gdriveupload.cli.open_context", self._fake_context()), redirect_stdout(out):
            code = main(env)

        self.assertEqual(code, 0)
        records = json.loads(out.getvalue())
        self.assertEqual(records[0]["file_name"], "a.zip")

    def test_unknown_sharing_mode_still_exits_zero(self) -> None:
        with patch("gdriveupload.cli.open_context", self._fake_context()):
            code = main(self._env(INPUT_SHARING="everyone"))
        self.assertEqual(code, 0)

    def test_missing_input_exits_non_zero(self) -> None:
        with patch("gdriveupload.cli.open_context") as open_context:
            code = main(self._env(INPUT_FOLDER_ID=""))
        self.assertEqual(code, 1)
        open_context.assert_not_called()

    def test_sharing_validation_happens_before_drive(self) -> None:
        with patch("gdriveupload.cli.open_context") as open_context:
            code = main(self._env(INPUT_SHARING="specific"))
        self.assertEqual(code, 1)
        open_context.assert_not_called()

    def test_missing_file_exits_non_zero(self) -> None:
        with patch("gdriveupload.cli.open_context", self._fake_context()):
            code = main(self._env(INPUT_FILENAME=str(self.tmp / "missing.zip")))
        self.assertEqual(code, 1)
        self.assertFalse(self.output.exists())

    def test_debug_input_uses_config_boolean_parsing(self) -> None:
        for value in ("1", "yes", "TRUE"):
            with patch("gdriveupload.cli.configure_logging") as configure, patch(
                "gdriveupload.cli.open_context", self._fake_context()
            ):
                main(self._env(INPUT_DEBUG=value))
            self.assertEqual(configure.call_args.kwargs, {"debug": True}, value)

    def test_preflight_failure_names_service_account(self) -> None:
        with patch("gdriveupload.cli.open_context", self._fake_context()):
            with self.assertLogs("gdriveupload", level="ERROR") as logs:
                code = main(self._env(INPUT_FOLDER_ID="MISSING"))

        self.assertEqual(code, 1)
        self.assertIn("uploader@example.com", "\n".join(logs.output))

    def test_authentication_failure_exits_non_zero(self) -> None:
        @contextmanager
        def failing(config):
            raise AuthenticationError("Failed to get access token")
            yield  # pragma: no cover

        with patch("gdriveupload.cli.open_context", failing):
            with self.assertLogs("gdriveupload", level="ERROR") as logs:
                code = main(self._env())

        self.assertEqual(code, 1)
        self.assertIn("AuthenticationError", "\n".join(logs.output))


if __name__ == "__main__":
    unittest.main()
