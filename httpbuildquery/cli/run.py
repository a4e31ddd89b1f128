import sys
import urllib.parse as urlparse
from typing import Optional

from colorama import Fore, Back, Style

from httpbuildquery.cli.argparser import parse_args, load_params
from httpbuildquery.exceptions import HttpBuildQueryError
from httpbuildquery.utils.qs import build_query, iter_pairs
from httpbuildquery.utils.url import build_url


def print_fail_msg(msg: str):
    print(f"{Back.RED}{Fore.WHITE}{Style.BRIGHT}FAILED: {msg}{Style.RESET_ALL}", file=sys.stderr)


def run(argv: Optional[list[str]] = None):
    args = parse_args(argv)
    quote_via = urlparse.quote if args.rfc3986 else urlparse.quote_plus
    params = load_params(args)

    if args.pairs:
        for pair in iter_pairs(params, quote_via=quote_via):
            print(pair)
        return

    if args.url is not None:
        print(build_url(args.url, params, quote_via=quote_via))
    else:
        print(build_query(params, quote_via=quote_via))


def main(argv: Optional[list[str]] = None) -> int:
    try:
        run(argv)
    except HttpBuildQueryError as e:
        print_fail_msg(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
