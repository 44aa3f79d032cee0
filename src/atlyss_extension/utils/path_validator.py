"""ATLYSS installation path validation."""
from pathlib import Path
from typing import List, Optional, Union

from ..core.constants import PLUGINS_SUBDIR, REQUIRED_FILES


class GamePathValidator:

    @staticmethod
    def missing_files(path: Union[str, Path, None], required_files: Optional[List[str]] = None) -> List[str]:
        """Return the required files absent from path (all of them if path is unusable)."""
        required = list(REQUIRED_FILES if required_files is None else required_files)
        if not path:
            return required

        path_obj = Path(path) if isinstance(path, str) else path
        if not path_obj.is_dir():
            return required

        return [name for name in required if not (path_obj / name).exists()]

    @staticmethod
    def get_plugins_dir(path: Union[str, Path]) -> Path:
        """Return BepInEx plugins directory path."""
        path_obj = Path(path) if isinstance(path, str) else path
        return path_obj / PLUGINS_SUBDIR
