from ._request_builder import RequestBuilder

__all__ = ["RequestBuilder"]
