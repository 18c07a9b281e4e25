"""
Unpacking downloaded sources with ``dpkg-source``.

The child's stdout is drained line by line on a background thread while
the main thread waits for the process to exit, so a chatty extraction can
never fill the pipe buffer and stall.
"""

import logging
import subprocess
import threading
from pathlib import Path
from typing import IO

from dpkg_builder.config import DPKG_SOURCE, DPKG_SOURCE_ARGS
from dpkg_builder.core.source import PackageSource
from dpkg_builder.errors import SubprocessError

log = logging.getLogger("dpkg-builder")


def _forward_lines(stream: IO[str]) -> None:
    for line in stream:
        log.info("[DPKG] %s", line.rstrip("\r\n"))


def extract(
    source: PackageSource,
    root: Path = Path("."),
    dpkg_source: str = DPKG_SOURCE,
) -> None:
    """
    Run ``dpkg-source -x --no-check <dsc>`` inside the package directory.

    Does nothing (beyond a warning) when no description file was
    downloaded.  Raises SubprocessError if the tool cannot be started or
    exits with a non-zero status.
    """
    if source.dsc_path is None:
        log.warning("No .dsc downloaded for %s, skipping extraction", source.name)
        return

    workdir = root / source.directory
    cmd = [dpkg_source, *DPKG_SOURCE_ARGS, source.dsc_path.name]
    log.info("Extracting %s in %s", source.dsc_path.name, workdir)
    log.debug("Running: %s", " ".join(cmd))

    try:
        proc = subprocess.Popen(
            cmd,
            cwd=workdir,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        raise SubprocessError(f"error starting {dpkg_source}: {exc}") from exc

    reader = threading.Thread(
        target=_forward_lines, args=(proc.stdout,), name="dpkg-source-stdout",
        daemon=True,
    )
    reader.start()
    returncode = proc.wait()
    reader.join()
    proc.stdout.close()

    if returncode != 0:
        raise SubprocessError(
            f"{dpkg_source} exited with status {returncode}", returncode=returncode
        )
