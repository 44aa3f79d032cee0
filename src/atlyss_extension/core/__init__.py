"""Game discovery, dependency staging, content classification and install planning."""

from .constants import GAME_ID, STEAMAPP_ID
from .exceptions import (
    ExtensionError, GameNotFoundError, DependencyInstallError, NoInstallableContentError
)
from .content import AcceptAll, ExtensionIn, ContentPredicate, classify, predicate_from_extensions
from .planner import plan_install
from .dependency_stager import DependencyStager
from .game_locator import GameDiscovery, GameLocator

__all__ = [
    'GAME_ID', 'STEAMAPP_ID',
    'ExtensionError', 'GameNotFoundError', 'DependencyInstallError', 'NoInstallableContentError',
    'AcceptAll', 'ExtensionIn', 'ContentPredicate', 'classify', 'predicate_from_extensions',
    'plan_install', 'DependencyStager', 'GameDiscovery', 'GameLocator',
]
