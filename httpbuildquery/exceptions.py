class HttpBuildQueryError(Exception):
    ...


class InvalidParams(HttpBuildQueryError):
    ...


class InvalidURL(HttpBuildQueryError):
    ...
