"""Decoding of submitted post fields."""

from typing import Dict, Mapping

from .models import Post


def post_params(data: Mapping[str, str]) -> Dict[str, str]:
    """
    Return the permitted post attributes present in ``data``.

    Both the grouped ``post[title]`` and the flat ``title`` names are accepted;
    the grouped name wins when both are sent. Fields that were not submitted
    are left out so callers can merge instead of overwrite.
    """
    params = {}
    for name in Post.EDITABLE_FIELDS:
        grouped = f"post[{name}]"
        if grouped in data:
            params[name] = data[grouped]
        elif name in data:
            params[name] = data[name]
    return params
