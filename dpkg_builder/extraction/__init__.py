"""Link extraction from index pages."""

from dpkg_builder.extraction.links import extract_hrefs

__all__ = ["extract_hrefs"]
