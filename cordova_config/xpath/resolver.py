"""
Absolute to root-relative path translation.

The node store only evaluates paths relative to a context node, so a path
written against the document (``/widget/platform``) is rewritten to start
at the root (``./platform``).

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Optional

from ..core.constants import ROOT_TAG


def fix_absolute_xpath(path: Optional[str], root_tag: str = ROOT_TAG) -> Optional[str]:
    """
    Convert an absolute path to an equivalent path relative to the root.

    Args:
        path: Path that may be absolute, relative, empty or None
        root_tag: Tag of the document root

    Returns:
        Path with a leading "/<root_tag>" replaced by "."; anything else unchanged
    """
    prefix = "/" + root_tag
    if path and path.startswith(prefix):
        return path.replace(prefix, ".", 1)
    return path
