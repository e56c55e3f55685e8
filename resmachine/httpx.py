from resmachine._integrations._httpx import internal_to_httpx as to_httpx

__all__ = ("to_httpx",)
