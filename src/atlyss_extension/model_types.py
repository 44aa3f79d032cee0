"""Type definitions for better code clarity and IDE support."""
from typing import Any, Callable, Dict, List, NamedTuple, Optional


class GameDescriptor(NamedTuple):
    """Identifies the supported game."""
    game_id: str
    steam_app_id: str
    name: str
    executable: str


class CopyInstruction(NamedTuple):
    """One archive entry to place into the mod staging folder."""
    source: str
    destination: str
    type: str = "copy"


class ClassificationResult(NamedTuple):
    """Result of the installer support test."""
    supported: bool
    required_files: List[str]


class InstallResult(NamedTuple):
    """Instructions handed back to the mod manager."""
    instructions: List[CopyInstruction]


class GameRecord(NamedTuple):
    """Installed game as reported by the store discovery service."""
    app_id: str
    game_path: Optional[str]


class GameRegistration(NamedTuple):
    """Everything the mod manager needs to support the game."""
    id: str
    name: str
    merge_mods: bool
    query_path: Callable[[], str]
    supported_tools: List[Any]
    query_mod_path: Callable[..., str]
    logo: str
    executable: Callable[..., str]
    required_files: List[str]
    setup: Callable[[Any], None]
    environment: Dict[str, str]
    details: Dict[str, str]
