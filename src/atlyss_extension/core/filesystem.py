"""Filesystem capability used by the dependency stager."""
import shutil
from pathlib import Path
from typing import List, Protocol, Union, runtime_checkable

PathLike = Union[str, Path]


@runtime_checkable
class FileSystem(Protocol):
    def ensure_dir(self, path: PathLike) -> None: ...
    def list_dir(self, path: PathLike) -> List[str]: ...
    def copy(self, src: PathLike, dst: PathLike, overwrite: bool = True) -> None: ...


class LocalFileSystem:
    """FileSystem backed by pathlib/shutil."""

    def ensure_dir(self, path: PathLike) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def list_dir(self, path: PathLike) -> List[str]:
        return sorted(entry.name for entry in Path(path).iterdir())

    def copy(self, src: PathLike, dst: PathLike, overwrite: bool = True) -> None:
        """Copy a file or a directory tree.

        Directories are merged into an existing destination: bundled files
        replace their counterparts and files only present at dst are kept.
        """
        src, dst = Path(src), Path(dst)
        if not overwrite and dst.exists():
            raise FileExistsError(f"Destination exists: {dst}")

        if src.is_dir():
            # A file in the way of a directory dependency is replaced
            if dst.exists() and not dst.is_dir():
                dst.unlink()
            shutil.copytree(src, dst, dirs_exist_ok=True)
            return

        # copy2 would write into an existing directory instead of replacing it
        if dst.is_dir():
            shutil.rmtree(dst)
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)
