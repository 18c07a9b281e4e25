"""
dpkg_builder
============
Fetch a Debian source package (``.dsc``, ``.orig.tar.*`` and
``.debian.tar.xz``) from the distribution index and unpack it with
``dpkg-source``.

Package structure
-----------------
dpkg_builder/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── errors.py         – failure taxonomy
├── session.py        – requests.Session factory
├── cli.py            – argparse CLI (``python -m dpkg_builder``)
├── extraction/       – anchor href extraction (BeautifulSoup)
├── core/
│   ├── source.py     – PackageSource + artifact classification
│   ├── storage.py    – idempotent streaming downloads
│   ├── extract.py    – dpkg-source invocation
│   └── fetcher.py    – the fetch pipeline
└── utils/            – URL resolution and logging

Quick start
-----------
    from pathlib import Path
    from dpkg_builder import fetch_package

    source = fetch_package("hello", root=Path("work"))
    print(source.dsc_path)
"""

from .core import ArtifactRole, PackageSource, classify_href, download, extract, fetch_package
from .errors import (
    DpkgBuilderError,
    FilesystemError,
    NetworkError,
    ParseError,
    SubprocessError,
    UsageError,
)
from .extraction import extract_hrefs
from .utils import index_url, resolve_url

__all__ = [
    "ArtifactRole",
    "PackageSource",
    "classify_href",
    "download",
    "extract",
    "fetch_package",
    "extract_hrefs",
    "index_url",
    "resolve_url",
    "DpkgBuilderError",
    "FilesystemError",
    "NetworkError",
    "ParseError",
    "SubprocessError",
    "UsageError",
]
