"""Schema-agnostic document trees and their structural merge.

A document is the JSON-compatible tree built from ``dict`` (objects),
``list`` (arrays), ``str``, ``int``, ``float``, ``bool`` and ``None``. It is
the medium in which default values and user values are combined, independent
of any concrete configuration type.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Union

__all__ = ["Document", "DocumentValue", "merge_documents"]

DocumentValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]
Document = Dict[str, DocumentValue]


def merge_documents(base: DocumentValue, overlay: DocumentValue) -> DocumentValue:
    """Combine *overlay* onto *base* and return a new tree.

    Rules, applied at every path:

    - objects on both sides merge key by key, recursively;
    - a ``None`` overlay value never replaces anything;
    - any other overlay value (arrays included) replaces the base value
      wholesale, so a user list fully supersedes the default list.

    Keys present only in *overlay* are carried into the result. Neither input
    is modified.
    """
    if overlay is None:
        return copy.deepcopy(base)
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged: Dict[str, Any] = copy.deepcopy(base)
        for key, value in overlay.items():
            if value is None:
                continue
            if key in merged:
                merged[key] = merge_documents(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged
    return copy.deepcopy(overlay)
