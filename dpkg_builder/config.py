"""
Configuration constants for dpkg-builder.
"""

import os

# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
APP_NAME = "dpkg-builder"
APP_VERSION = "0.0.1"
APP_USAGE = "Build a package from debian-testing"

# ---------------------------------------------------------------------------
# Index host
# ---------------------------------------------------------------------------
# Distribution index; the package name is path-escaped and appended.
# Can be overridden with the DPKG_BUILDER_BASE_URL env var.
DEFAULT_BASE_URL = os.environ.get(
    "DPKG_BUILDER_BASE_URL", "https://packages.debian.org/buster/"
)

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
REQUEST_TIMEOUT: float | None = None   # no timeout: a hung server blocks forever
STREAM_CHUNK = 524288                  # 512 KiB per write when streaming to disk
USER_AGENT = f"{APP_NAME}/{APP_VERSION} (+python-requests)"

# ---------------------------------------------------------------------------
# Source extraction
# ---------------------------------------------------------------------------
DPKG_SOURCE = os.environ.get("DPKG_SOURCE", "dpkg-source")
DPKG_SOURCE_ARGS = ("-x", "--no-check")

# ---------------------------------------------------------------------------
# Artifact suffixes (disjoint, case-sensitive)
# ---------------------------------------------------------------------------
DSC_SUFFIXES = (".dsc",)
ORIG_SUFFIXES = (".orig.tar.xz", ".orig.tar.gz")
DEBIAN_SUFFIXES = (".debian.tar.xz",)
