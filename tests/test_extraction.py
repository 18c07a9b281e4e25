"""
Tests for anchor href extraction.
"""

import io
import unittest

from dpkg_builder.extraction.links import extract_hrefs


INDEX_HTML = b"""
<html>
<head>
    <link href="/style.css" rel="stylesheet">
    <script src="/js/main.js"></script>
</head>
<body>
    <a href="hello_2.10-2.dsc">[hello_2.10-2.dsc]</a>
    <img src="/logo.png">
    <a name="anchor-only">no href</a>
    <a href="hello_2.10.orig.tar.gz">[hello_2.10.orig.tar.gz]</a>
    <a href="hello_2.10-2.debian.tar.xz">[hello_2.10-2.debian.tar.xz]</a>
    <a href="changelog">changelog</a>
</body>
</html>
"""


class TestExtractHrefs(unittest.TestCase):
    def test_document_order(self):
        self.assertEqual(
            extract_hrefs(INDEX_HTML),
            [
                "hello_2.10-2.dsc",
                "hello_2.10.orig.tar.gz",
                "hello_2.10-2.debian.tar.xz",
                "changelog",
            ],
        )

    def test_other_tags_ignored(self):
        result = extract_hrefs(INDEX_HTML)
        self.assertNotIn("/style.css", result)
        self.assertNotIn("/js/main.js", result)
        self.assertNotIn("/logo.png", result)

    def test_duplicates_kept(self):
        html = '<a href="a.dsc">1</a><a href="a.dsc">2</a>'
        self.assertEqual(extract_hrefs(html), ["a.dsc", "a.dsc"])

    def test_readable_stream(self):
        stream = io.BytesIO(INDEX_HTML)
        self.assertEqual(len(extract_hrefs(stream)), 4)
        self.assertEqual(stream.read(), b"")

    def test_text_input(self):
        self.assertEqual(extract_hrefs('<p><a href="/x">x</a></p>'), ["/x"])

    def test_empty_input(self):
        self.assertEqual(extract_hrefs(b""), [])

    def test_no_anchors(self):
        self.assertEqual(extract_hrefs("<html><body>nothing</body></html>"), [])

    def test_malformed_does_not_raise(self):
        html = '<a href="a.dsc">ok</a><div <<a href="b'
        result = extract_hrefs(html)
        self.assertEqual(result[0], "a.dsc")


if __name__ == "__main__":
    unittest.main()
