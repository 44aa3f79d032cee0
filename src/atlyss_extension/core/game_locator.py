"""Finds the ATLYSS installation through the store discovery service."""
from typing import List, Protocol

from .constants import STEAMAPP_ID
from .exceptions import GameNotFoundError
from ..model_types import GameRecord
from ..utils.path_validator import GamePathValidator
from ..utils.symbols import LogSymbols

NOT_FOUND_MESSAGE = "Unable to locate ATLYSS installation."


class GameDiscovery(Protocol):
    def find_by_app_id(self, app_ids: List[str]) -> GameRecord: ...


class GameLocator:

    def __init__(self, discovery: GameDiscovery, app_id: str = STEAMAPP_ID, log_callback=None):
        self.discovery = discovery
        self.app_id = app_id
        self.log_callback = log_callback

    def _log(self, message, **kwargs):
        if self.log_callback:
            self.log_callback(message, **kwargs)

    def locate(self) -> str:
        """Return the install folder of the game, raising GameNotFoundError otherwise."""
        try:
            game = self.discovery.find_by_app_id([self.app_id])
        except Exception as e:
            self._log(f"  {LogSymbols.ERROR} Steam app {self.app_id} lookup failed: {e}", debug=True)
            raise GameNotFoundError(NOT_FOUND_MESSAGE) from e

        game_path = getattr(game, 'game_path', None)
        if not game_path:
            raise GameNotFoundError(NOT_FOUND_MESSAGE)

        missing = GamePathValidator.missing_files(game_path)
        if missing:
            self._log(f"  {LogSymbols.WARNING} {game_path} is missing {', '.join(missing)}", warning=True)
        else:
            self._log(f"  {LogSymbols.SUCCESS} Found ATLYSS at {game_path}", debug=True)
        return str(game_path)
