import argparse, json, sys
from typing import Optional

from httpbuildquery.exceptions import InvalidParams
from httpbuildquery.utils.file import open_read


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='httpbuildquery',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description='builds a PHP http_build_query style query string from a JSON object'
    )

    parser.add_argument(
        'params',
        help='params as a JSON object string (e.g. {"user":{"name":"Bob"}}), reads stdin when omitted or -',
        nargs='?',
        default='-',
        type=str
    )

    parser.add_argument(
        '-f', '--file',
        help='read the params JSON object from a file instead',
        default=None,
        type=str
    )

    parser.add_argument(
        '--rfc3986',
        help='encode spaces as %%20 instead of +',
        action='store_true'
    )

    parser.add_argument(
        '--url',
        help='base URL to attach the query string to',
        default=None,
        type=str
    )

    parser.add_argument(
        '--pairs',
        help='print each encoded key=value pair on its own line',
        action='store_true'
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def load_params(namespace: argparse.Namespace) -> dict:
    """
        Loads the params JSON object from the file, argument or stdin

        Args:
            namespace: the parsed command arguments

        Returns:
            the params

        Raises:
            InvalidParams: if the params could not be read or are not a JSON object
    """
    try:
        if namespace.file is not None:
            raw = open_read(namespace.file)
        elif namespace.params == '-':
            raw = sys.stdin.read()
        else:
            raw = namespace.params
    except OSError as e:
        raise InvalidParams(f"could not read params: {e}") from e

    try:
        params = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidParams(f"params are not valid JSON: {e}") from e

    if not isinstance(params, dict):
        raise InvalidParams("params must be a JSON object")
    return params
