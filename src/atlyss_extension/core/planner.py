"""Turns an extracted archive listing into copy instructions."""
import os
from typing import List, Optional

from .content import MOD_CONTENT, ContentPredicate
from .exceptions import NoInstallableContentError
from ..model_types import CopyInstruction

_SEPARATORS = tuple({'/', os.sep})


def is_directory_entry(entry: str) -> bool:
    return entry.endswith(_SEPARATORS)


def find_anchor(files: List[str], predicate: ContentPredicate = MOD_CONTENT) -> Optional[str]:
    """First file entry matching the predicate, or None."""
    return next((f for f in files if not is_directory_entry(f) and predicate(f)), None)


def _within_root(entry: str, root: str) -> bool:
    if not root:
        return True
    return entry.startswith(root) and entry[len(root):len(root) + 1] in _SEPARATORS


def plan_install(files: List[str], predicate: ContentPredicate = MOD_CONTENT) -> List[CopyInstruction]:
    """Build root-relative copy instructions for an archive listing.

    The anchor (first matching file) marks the mod's root folder, which lets
    archives that wrap the mod in an extra folder install the same way as flat
    ones. Directory entries and anything outside the root are dropped.

    Raises:
        NoInstallableContentError: no file entry matches the predicate
    """
    anchor = find_anchor(files, predicate)
    if anchor is None:
        raise NoInstallableContentError(
            f"No installable content among {len(files)} archive entries")

    root = os.path.dirname(anchor)
    idx = anchor.rfind(os.path.basename(anchor))

    return [
        CopyInstruction(source=f, destination=f[idx:])
        for f in files
        if _within_root(f, root) and not is_directory_entry(f)
    ]
