"""
End-to-end tests for the fetch pipeline with a mocked HTTP session.
"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from dpkg_builder.core.fetcher import fetch_artifacts, fetch_package
from dpkg_builder.core.source import ArtifactRole, PackageSource
from dpkg_builder.errors import NetworkError

BASE = "https://packages.example.org/buster/"

INDEX_HTML = b"""
<html><body>
<ul>
  <li><a href="foo_1.0.dsc">[foo_1.0.dsc]</a></li>
  <li><a href="foo_1.0.orig.tar.gz">[foo_1.0.orig.tar.gz]</a></li>
  <li><a href="foo_1.0.debian.tar.xz">[foo_1.0.debian.tar.xz]</a></li>
  <li><a href="changelog">changelog</a></li>
</ul>
</body></html>
"""

ARTIFACTS = {
    BASE + "foo_1.0.dsc": b"Format: 3.0 (quilt)\nSource: foo\n",
    BASE + "foo_1.0.orig.tar.gz": b"\x1f\x8boriginal",
    BASE + "foo_1.0.debian.tar.xz": b"\xfd7zXZdebian",
}


class FakeSession:
    """Serves the index page and artifacts from memory, recording requests."""

    def __init__(self, pages: dict[str, bytes]) -> None:
        self.pages = pages
        self.requested: list[str] = []

    def get(self, url, **kwargs):
        self.requested.append(url)
        resp = MagicMock()
        if url not in self.pages:
            resp.raise_for_status.side_effect = requests.HTTPError(f"404 for {url}")
            return resp
        body = self.pages[url]
        resp.content = body
        resp.headers = {"Content-Length": str(len(body))}
        resp.iter_content.return_value = [body]
        return resp


class TestFetchPackage(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.session = FakeSession({BASE + "foo": INDEX_HTML, **ARTIFACTS})

    def tearDown(self):
        self._tmp.cleanup()

    def test_downloads_three_artifacts(self):
        src = fetch_package(
            "foo", session=self.session, base_url=BASE, root=self.root,
            extract_sources=False,
        )
        files = sorted(p.name for p in (self.root / "foo").iterdir())
        self.assertEqual(
            files,
            ["foo_1.0.debian.tar.xz", "foo_1.0.dsc", "foo_1.0.orig.tar.gz"],
        )
        self.assertEqual(src.dsc_path, self.root / "foo" / "foo_1.0.dsc")
        self.assertEqual(
            (self.root / "foo" / "foo_1.0.dsc").read_bytes(),
            ARTIFACTS[BASE + "foo_1.0.dsc"],
        )

    def test_fetch_order(self):
        fetch_package(
            "foo", session=self.session, base_url=BASE, root=self.root,
            extract_sources=False,
        )
        self.assertEqual(
            self.session.requested,
            [
                BASE + "foo",
                BASE + "foo_1.0.dsc",
                BASE + "foo_1.0.debian.tar.xz",
                BASE + "foo_1.0.orig.tar.gz",
            ],
        )

    def test_rerun_fetches_only_index(self):
        for _ in range(2):
            fetch_package(
                "foo", session=self.session, base_url=BASE, root=self.root,
                extract_sources=False,
            )
        self.assertEqual(len(self.session.requested), 5)
        self.assertEqual(self.session.requested[4], BASE + "foo")

    @patch("dpkg_builder.core.fetcher.extract")
    def test_extracts_after_download(self, mock_extract):
        src = fetch_package("foo", session=self.session, base_url=BASE, root=self.root)
        mock_extract.assert_called_once_with(src, self.root)

    def test_index_failure(self):
        with self.assertRaises(NetworkError):
            fetch_package(
                "bar", session=self.session, base_url=BASE, root=self.root,
                extract_sources=False,
            )
        self.assertFalse((self.root / "bar").exists())

    def test_native_package_without_orig(self):
        html = b'<a href="bar_2.dsc">dsc</a><a href="bar_2.debian.tar.xz">d</a>'
        session = FakeSession({
            BASE + "bar": html,
            BASE + "bar_2.dsc": b"dsc",
            BASE + "bar_2.debian.tar.xz": b"deb",
        })
        src = fetch_package(
            "bar", session=session, base_url=BASE, root=self.root,
            extract_sources=False,
        )
        self.assertIsNone(src.orig)
        self.assertEqual(len(list((self.root / "bar").iterdir())), 2)


class TestFetchArtifacts(unittest.TestCase):
    def test_absolute_href_used_as_is(self):
        pool = "http://deb.example.org/pool/main/f/foo/foo_1.0.dsc"
        session = FakeSession({pool: b"dsc"})
        src = PackageSource(name="foo", base_url=BASE, dsc=pool)
        with tempfile.TemporaryDirectory() as tmp:
            paths = fetch_artifacts(src, session, Path(tmp))
            self.assertEqual(paths[ArtifactRole.DSC], Path(tmp) / "foo" / "foo_1.0.dsc")
        self.assertEqual(session.requested, [pool])

    def test_no_links_downloads_nothing(self):
        session = FakeSession({})
        src = PackageSource(name="foo", base_url=BASE)
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(fetch_artifacts(src, session, Path(tmp)), {})
            self.assertFalse((Path(tmp) / "foo").exists())
        self.assertIsNone(src.dsc_path)
        self.assertEqual(session.requested, [])


if __name__ == "__main__":
    unittest.main()
