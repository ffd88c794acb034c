import unittest

from iptvdesk.dto.credentials import Credentials
from iptvdesk.enum.output_format import OutputFormat
from iptvdesk.utils.url_tools import (
    build_m3u,
    extract_credentials,
    format_access_lines,
    format_xtream_lines,
    normalize_base_url,
    replace_base_url,
)

PLAYLIST_URL = (
    "http://old.example:8080/get.php"
    "?username=bob&password=secret&type=m3u_plus&output=ts"
)


class TestNormalizeBaseUrl(unittest.TestCase):
    def test_without_trailing_slash_is_unchanged(self):
        self.assertEqual(normalize_base_url("http://host.example"), "http://host.example")

    def test_drops_single_trailing_slash(self):
        self.assertEqual(normalize_base_url("http://host.example/"), "http://host.example")

    def test_drops_only_one_slash(self):
        self.assertEqual(normalize_base_url("http://host.example//"), "http://host.example/")

    def test_idempotent(self):
        for base in ["http://a.example", "http://a.example/", "http://a.example:25461/"]:
            once = normalize_base_url(base)
            self.assertEqual(normalize_base_url(once), once)

    def test_empty_string(self):
        self.assertEqual(normalize_base_url(""), "")


class TestReplaceBaseUrl(unittest.TestCase):
    def test_swaps_scheme_host_and_port(self):
        result = replace_base_url(PLAYLIST_URL, "https://new.example/")
        self.assertEqual(
            result,
            "https://new.example/get.php"
            "?username=bob&password=secret&type=m3u_plus&output=ts",
        )

    def test_keeps_path_and_query_verbatim(self):
        original = "http://old.example/live/a%20b/1.ts?x=1&y=%2F&x=2&z=a+b"
        result = replace_base_url(original, "http://new.example")
        self.assertEqual(result, "http://new.example/live/a%20b/1.ts?x=1&y=%2F&x=2&z=a+b")
        self.assertTrue(result.startswith(normalize_base_url("http://new.example")))

    def test_bare_host_gets_root_path(self):
        self.assertEqual(
            replace_base_url("http://old.example", "http://new.example"),
            "http://new.example/",
        )

    def test_empty_query_is_dropped(self):
        self.assertEqual(
            replace_base_url("http://old.example/get.php?", "http://new.example"),
            "http://new.example/get.php",
        )

    def test_fragment_is_dropped(self):
        self.assertEqual(
            replace_base_url("http://old.example/p?a=1#top", "http://new.example"),
            "http://new.example/p?a=1",
        )

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(
            replace_base_url("  http://old.example/p?a=1\n", "http://new.example"),
            "http://new.example/p?a=1",
        )

    def test_missing_slashes_after_special_scheme(self):
        for url in ["http:/old.example/get.php?a=1", "http:old.example/get.php?a=1"]:
            with self.subTest(url=url):
                self.assertEqual(
                    replace_base_url(url, "http://new.example"),
                    "http://new.example/get.php?a=1",
                )
        self.assertEqual(
            extract_credentials("http:/old.example/get.php?username=bob"),
            Credentials(username="bob"),
        )

    def test_invalid_urls_yield_none(self):
        for url in [
            "not a url",
            "",
            "old.example/get.php?username=bob",
            "http://",
            "http://old.example:99999/get.php",
            "http://old.example:port/get.php",
            "http://[::1/get.php",
            "http://exa mple.com/get.php?a=1",
            "http:",
        ]:
            with self.subTest(url=url):
                self.assertIsNone(replace_base_url(url, "http://new.example"))


class TestExtractCredentials(unittest.TestCase):
    def test_both_present(self):
        creds = extract_credentials(
            "http://x.com/get.php?username=bob&password=secret&type=m3u_plus"
        )
        self.assertEqual(creds, Credentials(username="bob", password="secret"))

    def test_partial(self):
        creds = extract_credentials("http://x.com/get.php?username=bob")
        self.assertEqual(creds, Credentials(username="bob", password=None))

    def test_not_a_url(self):
        creds = extract_credentials("not a url")
        self.assertEqual(creds, Credentials())
        self.assertTrue(creds.is_empty())

    def test_keys_are_case_sensitive(self):
        creds = extract_credentials("http://x.com/get.php?Username=bob&PASSWORD=secret")
        self.assertEqual(creds, Credentials())

    def test_blank_value_is_kept(self):
        creds = extract_credentials("http://x.com/get.php?username=&password=secret")
        self.assertEqual(creds.username, "")
        self.assertEqual(creds.password, "secret")

    def test_first_value_wins_and_is_decoded(self):
        creds = extract_credentials(
            "http://x.com/get.php?username=a%40b&username=other&password=p+w"
        )
        self.assertEqual(creds, Credentials(username="a@b", password="p w"))


class TestBuildM3U(unittest.TestCase):
    def test_with_trailing_slash(self):
        self.assertEqual(
            build_m3u("http://host.example/", "bob", "secret", "m3u8"),
            "http://host.example/get.php?username=bob&password=secret&type=m3u_plus&output=m3u8",
        )

    def test_without_trailing_slash(self):
        self.assertEqual(
            build_m3u("http://host.example", "bob", "secret", "ts"),
            "http://host.example/get.php?username=bob&password=secret&type=m3u_plus&output=ts",
        )

    def test_accepts_enum(self):
        self.assertEqual(
            build_m3u("http://host.example", "bob", "secret", OutputFormat.M3U8),
            build_m3u("http://host.example", "bob", "secret", "m3u8"),
        )

    def test_credentials_are_not_encoded(self):
        url = build_m3u("http://host.example", "a b", "p&w", OutputFormat.TS)
        self.assertEqual(
            url,
            "http://host.example/get.php?username=a b&password=p&w&type=m3u_plus&output=ts",
        )

    def test_empty_credentials(self):
        self.assertEqual(
            build_m3u("http://host.example", "", "", OutputFormat.TS),
            "http://host.example/get.php?username=&password=&type=m3u_plus&output=ts",
        )

    def test_extract_reads_back_built_credentials(self):
        for username, password in [("bob", "secret"), ("user01", "9f8e7d")]:
            url = build_m3u("http://host.example/", username, password, OutputFormat.TS)
            self.assertEqual(
                extract_credentials(url),
                Credentials(username=username, password=password),
            )


class TestTextBlocks(unittest.TestCase):
    def test_access_lines(self):
        self.assertEqual(
            format_access_lines("http://host.example", "bob", "secret"),
            "Username: bob\nPassword: secret\nURL: http://host.example",
        )

    def test_xtream_lines(self):
        self.assertEqual(
            format_xtream_lines("http://host.example", "bob", "secret"),
            "Server: http://host.example\nUsername: bob\nPassword: secret",
        )
