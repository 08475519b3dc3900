import unittest

import gdriveupload


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(gdriveupload, "UploadOrchestrator"))
        self.assertTrue(hasattr(gdriveupload, "RemoteFolderIndex"))
        self.assertTrue(hasattr(gdriveupload, "TransferExecutor"))
        self.assertTrue(hasattr(gdriveupload, "SharingConfigurator"))
        self.assertTrue(hasattr(gdriveupload, "ResultReporter"))
        self.assertTrue(hasattr(gdriveupload, "decide"))

        self.assertTrue(hasattr(gdriveupload, "ServiceAccountInfo"))
        self.assertTrue(hasattr(gdriveupload, "UploadConfig"))
        self.assertTrue(hasattr(gdriveupload, "ReconciliationDecision"))
        self.assertTrue(hasattr(gdriveupload, "UploadResult"))

        self.assertTrue(hasattr(gdriveupload, "GDriveUploadError"))
        self.assertTrue(hasattr(gdriveupload, "TransferInitError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(gdriveupload, "__all__"))
        self.assertIn("UploadOrchestrator", gdriveupload.__all__)
        self.assertIn("GDriveUploadError", gdriveupload.__all__)
        for name in gdriveupload.__all__:
            self.assertTrue(hasattr(gdriveupload, name), name)


if __name__ == "__main__":
    unittest.main()
