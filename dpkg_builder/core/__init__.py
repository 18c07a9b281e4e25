"""Core logic – source model, downloads, extraction and the fetch pipeline."""

from dpkg_builder.core.source import ArtifactRole, PackageSource, classify_href
from dpkg_builder.core.storage import build_path, download, stream_to_file
from dpkg_builder.core.extract import extract
from dpkg_builder.core.fetcher import fetch_artifacts, fetch_package

__all__ = [
    "ArtifactRole",
    "PackageSource",
    "classify_href",
    "build_path",
    "download",
    "stream_to_file",
    "extract",
    "fetch_artifacts",
    "fetch_package",
]
