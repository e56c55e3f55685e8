__all__ = ("ResponseError", "InvalidArgument")


class ResponseError(Exception): ...


class InvalidArgument(ResponseError, TypeError): ...
