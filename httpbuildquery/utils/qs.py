import urllib.parse as urlparse

from collections.abc import Collection, Mapping
from typing import Any, Callable, Iterator, Optional

from httpbuildquery.exceptions import InvalidParams

QuoteFunc = Callable[..., str]

# Collections that are scalar values rather than containers
SCALAR_COLLECTIONS = (str, bytes, bytearray)


def to_display_str(value: Any) -> str | bytes:
    """
        Converts a key or leaf value into the form that gets percent-encoded

        Args:
            value: a key or a leaf value

        Returns:
            an empty string for None, true/false for booleans, the raw bytes for bytes,
            str(value) for anything else
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value)


def encode_scalar(value: Any, quote_via: QuoteFunc = urlparse.quote_plus) -> str:
    return quote_via(to_display_str(value), safe='')


def is_sequence(value: Any) -> bool:
    if isinstance(value, (Mapping, *SCALAR_COLLECTIONS)):
        return False
    return isinstance(value, Collection)


class KeyNode:
    """
        One segment of a key chain

        Appending a segment creates a new node pointing back at its parent, so a chain
        is never mutated once built and sibling branches share only their common prefix.
    """
    def __init__(self, key: str | bytes, parent: Optional['KeyNode'] = None):
        self.key = key
        self.parent = parent


    def child(self, key: str | bytes) -> 'KeyNode':
        return KeyNode(key, parent=self)


    def segments(self) -> list[str | bytes]:
        keys = []
        node = self
        while node is not None:
            keys.append(node.key)
            node = node.parent
        keys.reverse()
        return keys


    def to_str(self, quote_via: QuoteFunc = urlparse.quote_plus) -> str:
        """
            Encodes the chain in bracket notation, e.g. user[children][0][name]

            Args:
                quote_via: the percent-encoding function applied to every segment

            Returns:
                the encoded key chain
        """
        first, *rest = self.segments()
        k = encode_scalar(first, quote_via)
        for key in rest:
            k = k + "[" + encode_scalar(key, quote_via) + "]"
        return k


    def __repr__(self) -> str:
        return f"<KeyNode segments={self.segments()}>"


def _extend(chain: Optional[KeyNode], key: Any) -> KeyNode:
    key = to_display_str(key)
    if chain is None:
        return KeyNode(key)
    return chain.child(key)


def _walk(chain: Optional[KeyNode], value: Any, quote_via: QuoteFunc) -> Iterator[str]:
    if isinstance(value, Mapping):
        for child_k, child_v in value.items():
            yield from _walk(_extend(chain, child_k), child_v, quote_via)
    elif is_sequence(value):
        for index, child_v in enumerate(value):
            yield from _walk(_extend(chain, index), child_v, quote_via)
    else:
        # Only reachable below the root, so the chain always has a segment here
        yield chain.to_str(quote_via) + '=' + encode_scalar(value, quote_via)


def iter_pairs(params: Mapping, quote_via: QuoteFunc = urlparse.quote_plus) -> Iterator[str]:
    """
        Lazily yields the encoded key=value pairs of a nested mapping in traversal order

        Mappings are walked in their iteration order and sequences in index order. Empty
        containers yield nothing. Cyclic structures are not detected.

        Args:
            params: the root mapping
            quote_via: the percent-encoding function, urllib.parse.quote_plus (spaces as +)
                or urllib.parse.quote (spaces as %20)

        Returns:
            an iterator of encoded pairs, one per leaf

        Raises:
            InvalidParams: if params is not a mapping
    """
    if not isinstance(params, Mapping):
        raise InvalidParams(f"expected a mapping of params, got {type(params).__name__}")
    return _walk(None, params, quote_via)


def flatten_to_qs_list(params: Mapping, quote_via: QuoteFunc = urlparse.quote_plus) -> list[str]:
    return list(iter_pairs(params, quote_via=quote_via))


def build_query(params: Mapping, quote_via: QuoteFunc = urlparse.quote_plus) -> str:
    """
        Builds a PHP http_build_query style query string from a nested mapping

        Example:
            {"user": {"children": [{"name": "Bobby"}]}} -> user[children][0][name]=Bobby

        Args:
            params: the root mapping
            quote_via: the percent-encoding function for keys and values

        Returns:
            the query string, or an empty string for an empty mapping
    """
    return '&'.join(iter_pairs(params, quote_via=quote_via))


http_build_query = build_query
