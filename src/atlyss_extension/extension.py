"""
ATLYSS extension - Entry point
Registers the game and its mod installer with the mod manager.
"""
from typing import Any, Callable, List, Protocol

from .core.constants import (
    GAME, INSTALLER_NAME, INSTALLER_PRIORITY, LOGO, MERGE_MODS, REQUIRED_FILES,
)
from .core.content import classify
from .core.dependency_stager import DependencyStager
from .core.exceptions import ExtensionError
from .core.game_locator import GameDiscovery, GameLocator
from .core.planner import plan_install
from .model_types import ClassificationResult, GameRegistration, InstallResult
from .utils.error_messages import get_user_friendly_error, suggest_fix_for_error
from .utils.log_utils import host_log_callback


class ExtensionContext(Protocol):
    """What the mod manager hands to main()."""
    game_store: GameDiscovery

    def register_game(self, registration: GameRegistration) -> None: ...
    def register_installer(self, name: str, priority: int,
                           test_supported_content: Callable[[List[str], str], ClassificationResult],
                           install_content: Callable[[List[str]], InstallResult]) -> None: ...
    def log(self, message: str, level: str = 'info') -> None: ...


class AtlyssExtension:
    """Host-facing hooks, bound to one mod manager context."""

    def __init__(self, context: ExtensionContext, stager: DependencyStager = None, locator: GameLocator = None):
        self.log = host_log_callback(context.log)
        self.stager = stager or DependencyStager(self.log)
        self.locator = locator or GameLocator(context.game_store, log_callback=self.log)

    def _report(self, error: Exception):
        error_type = suggest_fix_for_error(error)
        self.log(str(error), error=True)
        if error_type:
            self.log(f"\n{get_user_friendly_error(error_type)}", error=True)

    def find_game(self) -> str:
        try:
            return self.locator.locate()
        except ExtensionError as e:
            self._report(e)
            raise

    def prepare_for_modding(self, discovery: Any) -> None:
        try:
            self.stager.stage(discovery.path)
        except ExtensionError as e:
            self._report(e)
            raise

    def test_supported_content(self, files: List[str], game_id: str) -> ClassificationResult:
        return classify(files, game_id)

    def install_content(self, files: List[str]) -> InstallResult:
        try:
            return InstallResult(instructions=plan_install(files))
        except ExtensionError as e:
            self._report(e)
            raise

    def registration(self) -> GameRegistration:
        return GameRegistration(
            id=GAME.game_id,
            name=GAME.name,
            merge_mods=MERGE_MODS,
            query_path=self.find_game,
            supported_tools=[],
            query_mod_path=lambda *args: '',
            logo=LOGO,
            executable=lambda *args: GAME.executable,
            required_files=list(REQUIRED_FILES),
            setup=self.prepare_for_modding,
            environment={'SteamAPPId': GAME.steam_app_id},
            details={'steamAppId': GAME.steam_app_id},
        )


def main(context: ExtensionContext) -> bool:
    """Main entry point for the extension."""
    extension = AtlyssExtension(context)
    context.register_game(extension.registration())
    context.register_installer(INSTALLER_NAME, INSTALLER_PRIORITY,
                               extension.test_supported_content, extension.install_content)

    extension.log('ATLYSS extension loaded successfully.')
    return True
