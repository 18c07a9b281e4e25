"""
Source-package model and artifact classification.

A Debian source package published on the index host consists of up to
three files, each recognised purely by its suffix:

    foo_1.0-1.dsc              description file
    foo_1.0.orig.tar.{xz,gz}   pristine upstream archive
    foo_1.0-1.debian.tar.xz    packaging metadata and patches
"""

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from dpkg_builder.config import DEBIAN_SUFFIXES, DSC_SUFFIXES, ORIG_SUFFIXES
from dpkg_builder.errors import UsageError


class ArtifactRole(enum.Enum):
    """The three file roles of a source package.

    Each value is ``(attribute, suffixes)``: the PackageSource attribute the
    role fills and the href suffixes that select it.
    """

    DSC = ("dsc", DSC_SUFFIXES)
    ORIG = ("orig", ORIG_SUFFIXES)
    DEBIAN = ("debian", DEBIAN_SUFFIXES)

    @property
    def attribute(self) -> str:
        return self.value[0]

    @property
    def suffixes(self) -> tuple[str, ...]:
        return self.value[1]


# Download order: description first, then the diff, then the upstream tarball.
FETCH_ORDER = (ArtifactRole.DSC, ArtifactRole.DEBIAN, ArtifactRole.ORIG)


def classify_href(href: str) -> ArtifactRole | None:
    """Return the role *href* plays, or None if it matches no suffix."""
    for role in ArtifactRole:
        if href.endswith(role.suffixes):
            return role
    return None


@dataclass
class PackageSource:
    """One package's discovered (and later downloaded) artifact set."""

    name: str
    base_url: str
    dsc: str | None = None
    orig: str | None = None
    debian: str | None = None
    dsc_path: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise UsageError("package name must not be empty")

    def fill_from_links(self, links: Iterable[str]) -> None:
        """Assign each href in *links* to its role; the last match wins."""
        for href in links:
            role = classify_href(href)
            if role is not None:
                setattr(self, role.attribute, href)

    def href_for(self, role: ArtifactRole) -> str | None:
        return getattr(self, role.attribute)

    def roles(self) -> dict[ArtifactRole, str]:
        """Present roles, in fetch order."""
        found = {}
        for role in FETCH_ORDER:
            href = self.href_for(role)
            if href is not None:
                found[role] = href
        return found

    @property
    def directory(self) -> Path:
        """Destination directory, relative to the download root."""
        return Path(self.name)
