import urllib.parse as urlparse

from collections.abc import Mapping
from requests.exceptions import RequestException
from requests.models import PreparedRequest

from httpbuildquery.exceptions import InvalidURL
from httpbuildquery.utils.qs import QuoteFunc, build_query


def build_url(base_url: str, params: Mapping, quote_via: QuoteFunc = urlparse.quote_plus) -> str:
    """
        Attaches the query string for params to an http(s) URL

        An existing query string on base_url is kept and the new pairs are appended after it.
        Nothing is sent, requests is only used to prepare the URL.

        Args:
            base_url: the URL to attach the query to
            params: the nested params mapping
            quote_via: the percent-encoding function for keys and values

        Returns:
            the prepared URL

        Raises:
            InvalidURL: if base_url is not an http(s) URL with a host
            InvalidParams: if params is not a mapping
    """
    try:
        split_url = urlparse.urlsplit(base_url)
    except ValueError as e:
        raise InvalidURL(str(e)) from e
    if split_url.scheme.lower() not in ('http', 'https') or not split_url.hostname:
        raise InvalidURL(f"expected an http(s) URL with a host, got {base_url!r}")

    query = build_query(params, quote_via=quote_via)
    req = PreparedRequest()
    try:
        req.prepare_url(base_url, query)
    except RequestException as e:
        raise InvalidURL(str(e)) from e
    return req.url
