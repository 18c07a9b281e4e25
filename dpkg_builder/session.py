"""
HTTP session creation for dpkg-builder.

Downloads are never retried: a failed request surfaces immediately as a
NetworkError, so the adapter is mounted with a zero-retry policy.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from dpkg_builder.config import USER_AGENT


def build_session(verify_ssl: bool = True) -> requests.Session:
    """Return a ``requests.Session`` with keep-alive and no retries."""
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,*/*;q=0.8",
        "Connection": "keep-alive",
    })
    return session
