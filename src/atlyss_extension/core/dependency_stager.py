import concurrent.futures
from pathlib import Path
from typing import Optional, Union

from .constants import DEPENDENCIES_DIR, MAX_COPY_WORKERS, PLUGINS_SUBDIR
from .exceptions import DependencyInstallError
from .filesystem import FileSystem, LocalFileSystem
from ..utils.path_validator import GamePathValidator
from ..utils.symbols import LogSymbols


class DependencyStager:
    """Copies the bundled BepInEx pack into the game folder."""

    def __init__(self, log_callback=None, filesystem: Optional[FileSystem] = None,
                 dependencies_dir: Union[str, Path] = DEPENDENCIES_DIR,
                 max_workers: int = MAX_COPY_WORKERS):
        self.log_callback = log_callback
        self.fs = filesystem or LocalFileSystem()
        self.dependencies_dir = Path(dependencies_dir)
        self.max_workers = max_workers

    def _log(self, message, **kwargs):
        if self.log_callback:
            self.log_callback(message, **kwargs)

    def _copy_dependency(self, name: str, game_dir: Path) -> str:
        src = self.dependencies_dir / name
        dst = game_dir / name
        try:
            self.fs.copy(src, dst, overwrite=True)
        except Exception as e:
            self._log(f"  {LogSymbols.ERROR} Error copying {name}: {e}", error=True)
            raise DependencyInstallError(name) from e
        self._log(f"  {LogSymbols.SUCCESS} Copied dependency: {name}")
        return name

    def stage(self, installation_path: Union[str, Path]) -> None:
        """Prepare the game folder for modding.

        Creates BepInEx/plugins, then copies every entry of the Dependencies
        folder into the game root in parallel, overwriting existing files.
        All copies are joined before returning; the first failure is raised
        and copies that already finished are left in place.

        Raises:
            DependencyInstallError: the Dependencies folder can't be listed
                or one of its entries can't be copied
        """
        game_dir = Path(installation_path)
        plugins_dir = GamePathValidator.get_plugins_dir(game_dir)
        try:
            self.fs.ensure_dir(plugins_dir)
        except OSError as e:
            self._log(f"  {LogSymbols.ERROR} Cannot create {plugins_dir}: {e}", error=True)
            raise DependencyInstallError(
                PLUGINS_SUBDIR.name,
                f"Failed to create plugins folder: {plugins_dir}") from e

        try:
            names = self.fs.list_dir(self.dependencies_dir)
        except OSError as e:
            self._log(f"  {LogSymbols.ERROR} Cannot read {self.dependencies_dir}: {e}", error=True)
            raise DependencyInstallError(
                self.dependencies_dir.name,
                f"Failed to read dependencies folder: {self.dependencies_dir}") from e

        if names:
            workers = max(1, min(len(names), self.max_workers))
            with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(self._copy_dependency, name, game_dir) for name in names]

            # Executor exit joined every copy; re-raise the first failure in listing order
            for future in futures:
                future.result()

        self._log(f"{LogSymbols.SUCCESS} All dependencies installed successfully.")
