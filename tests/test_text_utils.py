import unittest
import uuid

from pylinkval.core.exceptions import PatternError
from pylinkval.utils.digest import (
    decode_base64,
    encode_base64,
    generate_checksum,
    generate_uuid,
    is_valid_uuid,
    sha256_hash,
    verify_checksum,
)
from pylinkval.utils.text import extract_email_addresses, extract_urls, is_ascii_only, matches_pattern, to_slug

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestMatchesPattern(unittest.TestCase):

    def test_search_semantics(self):
        self.assertTrue(matches_pattern("hello world", r"wor"))
        self.assertTrue(matches_pattern("hello world", r"^hello"))
        self.assertFalse(matches_pattern("hello world", r"^world"))

    def test_invalid_pattern(self):
        with self.assertRaises(PatternError) as ctx:
            matches_pattern("text", "[unclosed")
        self.assertTrue(str(ctx.exception).startswith("Invalid regex pattern: "))
        self.assertIsInstance(ctx.exception, ValueError)


class TestTextHelpers(unittest.TestCase):

    def test_extract_email_addresses(self):
        text = "Contact a@b.com or c.d@e.org."
        self.assertEqual(extract_email_addresses(text), ["a@b.com", "c.d@e.org"])

    def test_extract_urls(self):
        text = 'See https://a.com/x?y=1 and <http://b.org/page> or "ftp://c.net".'
        self.assertEqual(extract_urls(text), ["https://a.com/x?y=1", "http://b.org/page"])

    def test_to_slug(self):
        self.assertEqual(to_slug("Hello, World!  Again"), "hello-world-again")

    def test_is_ascii_only(self):
        self.assertTrue(is_ascii_only("plain text"))
        self.assertFalse(is_ascii_only("café"))


class TestDigest(unittest.TestCase):

    def test_sha256_and_checksum(self):
        self.assertEqual(sha256_hash(""), EMPTY_SHA256)
        self.assertEqual(generate_checksum(""), EMPTY_SHA256[:8])
        self.assertTrue(verify_checksum("", EMPTY_SHA256[:8]))
        self.assertFalse(verify_checksum("x", EMPTY_SHA256[:8]))

    def test_base64(self):
        self.assertEqual(encode_base64("hello"), "aGVsbG8=")
        self.assertEqual(decode_base64("aGVsbG8="), "hello")

    def test_base64_errors(self):
        with self.assertRaisesRegex(ValueError, "^Base64 decode error"):
            decode_base64("not base64!")
        with self.assertRaisesRegex(ValueError, "^UTF-8 decode error"):
            decode_base64("/w==")

    def test_uuid(self):
        value = generate_uuid()
        self.assertTrue(is_valid_uuid(value))
        self.assertEqual(uuid.UUID(value).version, 4)
        self.assertFalse(is_valid_uuid("1234"))


if __name__ == '__main__':
    unittest.main()
