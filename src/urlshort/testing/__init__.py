"""Test utilities for urlshort applications.

    from urlshort.testing import TestClient, assert_redirect
"""

from urlshort.testing.assertions import assert_fell_through, assert_redirect
from urlshort.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_fell_through",
    "assert_redirect",
]
