"""Grouped List Fetching

The :mod:`grouped_list.fetch` package defines how a collection is retrieved from
its source and provides the default fetcher for HTTP sources.
"""

from .http_fetcher import Fetch, FetchSettings, HttpFetcher

__all__ = ["Fetch", "FetchSettings", "HttpFetcher"]
