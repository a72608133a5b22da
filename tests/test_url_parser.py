import unittest

from pylinkval.core.exceptions import ParseError
from pylinkval.urls import Url, parse, remove_dot_segments


class TestParse(unittest.TestCase):

    def test_full_url_components(self):
        """Test that every component of a full URL is extracted."""
        url = parse("HTTPS://user:pw@Example.COM:8443/a/b?x=1&y=2#top")
        self.assertEqual(url.scheme, "https")
        self.assertEqual(url.userinfo, "user:pw")
        self.assertEqual(url.host, "example.com")
        self.assertEqual(url.port, 8443)
        self.assertEqual(url.path, "/a/b")
        self.assertEqual(url.query, "x=1&y=2")
        self.assertEqual(url.fragment, "top")

    def test_default_port_is_dropped(self):
        url = parse("https://a.com:443/x")
        self.assertIsNone(url.port)
        self.assertEqual(url.effective_port, 443)
        self.assertEqual(str(url), "https://a.com/x")

    def test_empty_path_becomes_root(self):
        self.assertEqual(parse("http://a.com").path, "/")
        self.assertEqual(parse("http://a.com?q").path, "/")

    def test_dot_segments_are_removed(self):
        self.assertEqual(parse("http://a.com/a/./b/../c").path, "/a/c")

    def test_opaque_urls_have_no_host(self):
        """Test that schemes without an authority parse without a host."""
        mail = parse("mailto:someone@example.com")
        self.assertIsNone(mail.host)
        self.assertEqual(mail.path, "someone@example.com")

        data = parse("data:text/plain,hello")
        self.assertIsNone(data.host)
        self.assertEqual(data.path, "text/plain,hello")

    def test_file_url_with_empty_host(self):
        url = parse("file:///etc/hosts")
        self.assertEqual(url.host, "")
        self.assertEqual(url.path, "/etc/hosts")
        self.assertEqual(str(url), "file:///etc/hosts")

    def test_ipv6_host_keeps_brackets(self):
        url = parse("http://[::1]:8080/")
        self.assertEqual(url.host, "[::1]")
        self.assertEqual(url.port, 8080)

    def test_malformed_urls_raise(self):
        """Test that structurally invalid URLs raise ParseError."""
        for bad in [
            "",
            "example.com",
            "/relative/path",
            "1http://a.com",
            "http:a.com",
            "https://",
            "http://a.com:99999/",
            "http://a.com:8o/",
            "http://a b.com/",
            "http://[::zz]/",
            "http://[::1/",
        ]:
            with self.subTest(url=bad):
                with self.assertRaises(ParseError):
                    parse(bad)

    def test_parse_error_message(self):
        with self.assertRaises(ParseError) as ctx:
            parse("no-scheme-here")
        self.assertTrue(str(ctx.exception).startswith("Invalid URL: "))

    def test_round_trip(self):
        """Test that re-serializing a parsed URL parses to an equal value."""
        for text in [
            "https://a.com:443/path/#frag",
            "http://User@Host.com:8080/a/../b?q=1#f",
            "ftp://files.example.org/pub/",
            "mailto:a@b.c?subject=hi",
            "file:///tmp/x",
            "wss://[2001:db8::1]:9000/socket",
            "custom://host/p?",
        ]:
            with self.subTest(url=text):
                parsed = parse(text)
                self.assertEqual(parse(parsed.serialize()), parsed)

    def test_origin(self):
        url = parse("https://a.com/x")
        self.assertEqual(url.origin.port, 443)
        self.assertEqual(str(url.origin), "https://a.com")
        self.assertTrue(parse("mailto:x@y.z").origin.is_opaque)

    def test_url_is_immutable(self):
        url = Url(scheme="http", host="a.com", path="/")
        with self.assertRaises(AttributeError):
            url.host = "b.com"


class TestRemoveDotSegments(unittest.TestCase):

    def test_rfc_examples(self):
        self.assertEqual(remove_dot_segments("/a/b/c/./../../g"), "/a/g")
        self.assertEqual(remove_dot_segments("mid/content=5/../6"), "mid/6")

    def test_trailing_dot_segments_keep_slash(self):
        self.assertEqual(remove_dot_segments("/a/b/.."), "/a/")
        self.assertEqual(remove_dot_segments("/a/."), "/a/")

    def test_cannot_climb_above_root(self):
        self.assertEqual(remove_dot_segments("/../../x"), "/x")
        self.assertEqual(remove_dot_segments("/.."), "/")

    def test_empty_segments_are_kept(self):
        self.assertEqual(remove_dot_segments("/a//b"), "/a//b")


if __name__ == '__main__':
    unittest.main()
