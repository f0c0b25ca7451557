"""Index URL to return to after a mutation, with filters and page restored."""

from typing import Iterable
from urllib.parse import urlencode

from fastapi import Request

FILTER_PREFIX = "filter_"
CONTEXT_KEYS = ("city", "property", "unit", "per_page", "page")
NAMESPACED_METHODS = ("POST", "PUT")


def index_redirect(request: Request, index_path: str, extra_keys: Iterable[str] = ()) -> str:
    """Form submissions (POST/PUT) carry the index context as ``filter_<key>``;
    other verbs carry it under the plain key.
    """
    namespaced = request.method.upper() in NAMESPACED_METHODS
    params = {}
    for key in (*CONTEXT_KEYS, *extra_keys):
        value = request.query_params.get(f"{FILTER_PREFIX}{key}" if namespaced else key)
        if value is not None and value != "":
            params[key] = value
    if not params:
        return index_path
    return f"{index_path}?{urlencode(params)}"
