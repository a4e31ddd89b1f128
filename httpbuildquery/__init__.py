from httpbuildquery.utils.qs import build_query, flatten_to_qs_list, http_build_query, iter_pairs
from httpbuildquery.utils.url import build_url

__all__ = ['build_query', 'build_url', 'flatten_to_qs_list', 'http_build_query', 'iter_pairs']
