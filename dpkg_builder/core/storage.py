"""
Download manager: mapping artifact URLs to local paths and streaming them
to disk.

Downloads are idempotent by file name: if the destination already exists
it is returned as-is without touching the network.  Nothing verifies the
existing content, so a file truncated by an earlier failed run is trusted.
"""

import logging
from pathlib import Path
from typing import Iterator

import requests
from tqdm import tqdm

from dpkg_builder.config import REQUEST_TIMEOUT, STREAM_CHUNK
from dpkg_builder.errors import FilesystemError, NetworkError
from dpkg_builder.utils.url import url_filename

log = logging.getLogger("dpkg-builder")


def build_path(url: str, package: str, root: Path = Path(".")) -> tuple[Path, Path]:
    """
    Return ``(path, parent_dir)`` for *url*.

    ``parent_dir`` is ``<root>/<package>`` and the file name is the final
    segment of the URL path.
    """
    parent_dir = root / package
    return parent_dir / url_filename(url), parent_dir


def ensure_dir_exists(directory: Path) -> None:
    """Create *directory* (one level only); an existing directory is fine."""
    try:
        directory.mkdir(exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"error creating directory {directory}: {exc}") from exc


def stream_to_file(local_path: Path, chunks: Iterator[bytes]) -> int:
    """Write streaming *chunks* to *local_path*.

    Returns the total number of bytes written.
    """
    total = 0
    with local_path.open("wb") as fh:
        for chunk in chunks:
            if chunk:
                fh.write(chunk)
                total += len(chunk)
    log.debug("Streamed → %s (%d bytes)", local_path, total)
    return total


def _iter_body(resp: requests.Response, url: str, bar: tqdm) -> Iterator[bytes]:
    try:
        for chunk in resp.iter_content(chunk_size=STREAM_CHUNK):
            bar.update(len(chunk))
            yield chunk
    except requests.RequestException as exc:
        raise NetworkError(f"error downloading {url}: {exc}") from exc


def download(
    session: requests.Session,
    url: str,
    package: str,
    root: Path = Path("."),
    progress: bool = False,
) -> Path:
    """
    Download *url* into ``<root>/<package>/`` and return the local path.

    Skips the request entirely when the destination already exists.
    Raises NetworkError on transport failure or a non-success status and
    FilesystemError when the directory or file cannot be written.  A
    partially written file is left in place.
    """
    path, parent_dir = build_path(url, package, root)
    log.info("[FETCH] %s → %s", url, path)
    ensure_dir_exists(parent_dir)
    if path.exists():
        log.info("[SKIP] %s already exists", path)
        return path

    try:
        resp = session.get(url, stream=True, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"error downloading {url}: {exc}") from exc

    with resp:
        try:
            total = int(resp.headers.get("Content-Length") or 0) or None
        except ValueError:
            # Only sizes the progress bar; a garbled header is ignored.
            total = None
        with tqdm(
            total=total,
            desc=path.name,
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            dynamic_ncols=True,
            leave=False,
            disable=not progress,
        ) as bar:
            try:
                size = stream_to_file(path, _iter_body(resp, url, bar))
            except OSError as exc:
                raise FilesystemError(
                    f"error writing {url} to {path}: {exc}"
                ) from exc

    log.info("[SAVE] %s (%d bytes)", path, size)
    return path
