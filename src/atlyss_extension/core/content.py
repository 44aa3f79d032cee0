"""Content predicates and the installer support test.

The mod file extension setting decides which archive entries count as mod
content. An empty setting means every entry counts: BepInEx can load plugin
dlls, textures, models and animations, so no single extension marks an
archive as an ATLYSS mod.
"""
import os
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .constants import GAME_ID, MOD_FILE_EXTENSIONS
from ..model_types import ClassificationResult


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith('.'):
        ext = '.' + ext
    return ext


class ContentPredicate(ABC):
    """Decides whether an archive entry is installable content."""

    @abstractmethod
    def matches(self, entry: str) -> bool:
        ...

    def __call__(self, entry: str) -> bool:
        return self.matches(entry)


class AcceptAll(ContentPredicate):

    def matches(self, entry: str) -> bool:
        return True

    def __eq__(self, other):
        return isinstance(other, AcceptAll)

    def __hash__(self):
        return hash(AcceptAll)

    def __repr__(self):
        return "AcceptAll()"


class ExtensionIn(ContentPredicate):

    def __init__(self, extensions: Iterable[str]):
        self.extensions = frozenset(_normalize_ext(e) for e in extensions if e and e.strip())
        if not self.extensions:
            raise ValueError("ExtensionIn needs at least one extension; use AcceptAll instead")

    def matches(self, entry: str) -> bool:
        return os.path.splitext(entry)[1].lower() in self.extensions

    def __eq__(self, other):
        return isinstance(other, ExtensionIn) and other.extensions == self.extensions

    def __hash__(self):
        return hash(self.extensions)

    def __repr__(self):
        return f"ExtensionIn({sorted(self.extensions)!r})"


def predicate_from_extensions(extensions: Optional[Iterable[str]]) -> ContentPredicate:
    """Build the predicate for a mod file extension setting (empty: accept all)."""
    cleaned = [e for e in (extensions or ()) if e and e.strip()]
    return ExtensionIn(cleaned) if cleaned else AcceptAll()


MOD_CONTENT = predicate_from_extensions(MOD_FILE_EXTENSIONS)


def classify(files: List[str], game_id: str, predicate: ContentPredicate = MOD_CONTENT) -> ClassificationResult:
    """Check whether an archive listing is installable content for ATLYSS."""
    supported = game_id == GAME_ID and any(predicate(f) for f in files)
    return ClassificationResult(supported=supported, required_files=[])
