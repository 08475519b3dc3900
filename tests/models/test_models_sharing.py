import unittest

from gdriveupload.errors import ConfigurationError
from gdriveupload.models import SharingMode, SharingPolicy, SharingRole


class TestSharingPolicy(unittest.TestCase):
    def test_defaults(self) -> None:
        policy = SharingPolicy.from_inputs(None, None)
        self.assertEqual(policy.mode, "none")
        self.assertIs(policy.role, SharingRole.READER)
        self.assertFalse(policy.enabled)
        self.assertIs(policy.known_mode, SharingMode.NONE)

    def test_inputs_are_normalized(self) -> None:
        policy = SharingPolicy.from_inputs(" Domain ", "Writer", domain=" example.com ")
        self.assertIs(policy.known_mode, SharingMode.DOMAIN)
        self.assertIs(policy.role, SharingRole.WRITER)
        self.assertEqual(policy.domain, "example.com")

    def test_domain_requires_domain(self) -> None:
        with self.assertRaises(ConfigurationError):
            SharingPolicy.from_inputs("domain", "reader", domain="  ")

    def test_specific_requires_email(self) -> None:
        with self.assertRaises(ConfigurationError):
            SharingPolicy.from_inputs("specific", "reader")

    def test_unknown_role_is_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            SharingPolicy.from_inputs("anyone", "owner")

    def test_unknown_mode_is_kept(self) -> None:
        policy = SharingPolicy.from_inputs("public", "reader")
        self.assertEqual(policy.mode, "public")
        self.assertIsNone(policy.known_mode)
        self.assertTrue(policy.enabled)


if __name__ == "__main__":
    unittest.main()
