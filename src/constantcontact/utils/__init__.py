"""Utilities shared by the Constant Contact services."""

from .error_mapper import classify, parse_error_body
from .url_builder import build_url, encode_query, expand_template, next_link_url

__all__ = [
    "build_url",
    "encode_query",
    "expand_template",
    "next_link_url",
    "classify",
    "parse_error_body",
]
