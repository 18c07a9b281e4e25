"""
Fetch pipeline for a single source package.

    index page ─► hrefs ─► classify ─► resolve ─► download ─► dpkg-source -x

Every step runs sequentially and any failure propagates as a
DpkgBuilderError; nothing is retried or cleaned up.
"""

import logging
from pathlib import Path

import requests

from dpkg_builder.config import DEFAULT_BASE_URL, REQUEST_TIMEOUT
from dpkg_builder.core.extract import extract
from dpkg_builder.core.source import ArtifactRole, FETCH_ORDER, PackageSource
from dpkg_builder.core.storage import download
from dpkg_builder.errors import NetworkError
from dpkg_builder.extraction.links import extract_hrefs
from dpkg_builder.session import build_session
from dpkg_builder.utils.url import index_url, resolve_url

log = logging.getLogger("dpkg-builder")


def fetch_index(session: requests.Session, url: str) -> bytes:
    """GET the index page at *url* and return its body."""
    log.info("Downloading %s...", url)
    try:
        resp = session.get(url, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"error getting {url}: {exc}") from exc
    return resp.content


def fetch_artifacts(
    source: PackageSource,
    session: requests.Session,
    root: Path = Path("."),
    progress: bool = False,
) -> dict[ArtifactRole, Path]:
    """
    Download every present artifact of *source* into ``<root>/<name>/``.

    Roles without an href are skipped.  Sets ``source.dsc_path`` once the
    description file is on disk and returns the local path of each role
    that was fetched.
    """
    paths: dict[ArtifactRole, Path] = {}
    for role in FETCH_ORDER:
        href = source.href_for(role)
        if href is None:
            log.debug("No %s link for %s, skipping", role.name.lower(), source.name)
            continue
        url = resolve_url(href, source.base_url)
        paths[role] = download(session, url, source.name, root, progress=progress)
        if role is ArtifactRole.DSC:
            source.dsc_path = paths[role]
    return paths


def fetch_package(
    name: str,
    session: requests.Session | None = None,
    base_url: str = DEFAULT_BASE_URL,
    root: Path = Path("."),
    extract_sources: bool = True,
    progress: bool = False,
) -> PackageSource:
    """
    Discover, download and (optionally) unpack the sources of *name*.

    Returns the populated PackageSource.
    """
    source = PackageSource(name=name, base_url=index_url(name, base_url))
    if session is None:
        session = build_session()

    links = extract_hrefs(fetch_index(session, source.base_url))
    log.debug("Found %d link(s) on the index page", len(links))
    source.fill_from_links(links)

    log.info("Artifacts for %s: %s", name, ", ".join(source.roles().values()) or "none")

    fetch_artifacts(source, session, root, progress=progress)
    if extract_sources:
        extract(source, root)
    return source
