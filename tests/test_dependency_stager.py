import threading
from pathlib import Path

import pytest

from atlyss_extension.core.dependency_stager import DependencyStager
from atlyss_extension.core.exceptions import DependencyInstallError
from atlyss_extension.core.filesystem import FileSystem, LocalFileSystem


class Logger:
    def __init__(self):
        self.messages = []
    def __call__(self, msg, error=False, **kwargs):
        self.messages.append((msg, error))


class FakeFileSystem:
    """In-memory FileSystem recording every call."""

    def __init__(self, entries, fail_on=()):
        self.entries = list(entries)
        self.fail_on = set(fail_on)
        self.dirs = []
        self.copies = []
        self._lock = threading.Lock()

    def ensure_dir(self, path):
        self.dirs.append(Path(path))

    def list_dir(self, path):
        return list(self.entries)

    def copy(self, src, dst, overwrite=True):
        with self._lock:
            self.copies.append((Path(src).name, Path(dst), overwrite))
        if Path(src).name in self.fail_on:
            raise PermissionError(f"Access denied: {dst}")


@pytest.fixture
def bundle(tmp_path):
    deps = tmp_path / "Dependencies"
    (deps / "BepInEx" / "core").mkdir(parents=True)
    (deps / "BepInEx" / "core" / "BepInEx.dll").write_text("core-v5")
    (deps / "winhttp.dll").write_text("proxy")
    (deps / "doorstop_config.ini").write_text("enabled=true")
    return deps


def test_fake_filesystem_satisfies_protocol():
    assert isinstance(FakeFileSystem([]), FileSystem)
    assert isinstance(LocalFileSystem(), FileSystem)


class TestStageWithFakeFileSystem:

    def test_one_copy_per_dependency(self, tmp_path):
        fs = FakeFileSystem(["BepInEx", "winhttp.dll", "doorstop_config.ini"])
        logs = Logger()
        DependencyStager(logs, filesystem=fs, dependencies_dir=tmp_path / "deps").stage(tmp_path / "game")

        assert fs.dirs == [tmp_path / "game" / "BepInEx" / "plugins"]
        assert sorted(c[0] for c in fs.copies) == ["BepInEx", "doorstop_config.ini", "winhttp.dll"]
        assert all(dst.parent == tmp_path / "game" and overwrite for _, dst, overwrite in fs.copies)
        assert any("All dependencies installed successfully." in m for m, _ in logs.messages)

    def test_failed_copy_names_dependency(self, tmp_path):
        fs = FakeFileSystem(["BepInEx", "winhttp.dll", "doorstop_config.ini"], fail_on={"winhttp.dll"})
        logs = Logger()
        stager = DependencyStager(logs, filesystem=fs, dependencies_dir=tmp_path / "deps")

        with pytest.raises(DependencyInstallError) as excinfo:
            stager.stage(tmp_path / "game")

        assert excinfo.value.dependency == "winhttp.dll"
        assert "winhttp.dll" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, PermissionError)
        # The other copies were still issued and not rolled back
        assert len(fs.copies) == 3
        assert any(error and "winhttp.dll" in m for m, error in logs.messages)
        assert not any("All dependencies installed" in m for m, _ in logs.messages)

    def test_empty_bundle_only_creates_plugins_dir(self, tmp_path):
        fs = FakeFileSystem([])
        DependencyStager(filesystem=fs, dependencies_dir=tmp_path).stage(tmp_path / "game")
        assert fs.dirs == [tmp_path / "game" / "BepInEx" / "plugins"]
        assert fs.copies == []


class TestStageOnDisk:

    def test_copies_bundle_into_game(self, tmp_path, bundle):
        game = tmp_path / "ATLYSS"
        game.mkdir()
        DependencyStager(dependencies_dir=bundle).stage(str(game))

        assert (game / "BepInEx" / "plugins").is_dir()
        assert (game / "BepInEx" / "core" / "BepInEx.dll").read_text() == "core-v5"
        assert (game / "winhttp.dll").read_text() == "proxy"
        assert (game / "doorstop_config.ini").read_text() == "enabled=true"

    def test_restage_overwrites_without_duplicating(self, tmp_path, bundle):
        game = tmp_path / "ATLYSS"
        stager = DependencyStager(dependencies_dir=bundle)
        stager.stage(game)

        (game / "winhttp.dll").write_text("tampered")
        plugin = game / "BepInEx" / "plugins" / "SomeMod.dll"
        plugin.write_text("mod")
        stager.stage(game)

        assert (game / "winhttp.dll").read_text() == "proxy"
        # Directory dependencies are merged: user content inside them survives
        assert plugin.read_text() == "mod"
        assert sorted(p.name for p in game.iterdir()) == ["BepInEx", "doorstop_config.ini", "winhttp.dll"]

    def test_missing_bundle_raises(self, tmp_path):
        stager = DependencyStager(dependencies_dir=tmp_path / "missing")
        with pytest.raises(DependencyInstallError) as excinfo:
            stager.stage(tmp_path / "game")
        assert excinfo.value.dependency == "missing"
        assert (tmp_path / "game" / "BepInEx" / "plugins").is_dir()

    def test_file_dependency_replaces_directory_in_the_way(self, tmp_path, bundle):
        game = tmp_path / "ATLYSS"
        blocker = game / "doorstop_config.ini"
        blocker.mkdir(parents=True)
        (blocker / "stale.txt").write_text("old")

        DependencyStager(dependencies_dir=bundle).stage(game)

        assert blocker.is_file()
        assert blocker.read_text() == "enabled=true"

    def test_directory_dependency_replaces_file_in_the_way(self, tmp_path, bundle):
        target = tmp_path / "ATLYSS" / "BepInEx"
        target.parent.mkdir()
        target.write_text("not a folder")

        LocalFileSystem().copy(bundle / "BepInEx", target)

        assert target.is_dir()
        assert (target / "core" / "BepInEx.dll").read_text() == "core-v5"

    def test_file_where_plugins_folder_belongs_raises(self, tmp_path, bundle):
        game = tmp_path / "ATLYSS"
        game.mkdir()
        (game / "BepInEx").write_text("not a folder")
        logs = Logger()

        with pytest.raises(DependencyInstallError) as excinfo:
            DependencyStager(logs, dependencies_dir=bundle).stage(game)

        assert excinfo.value.dependency == "plugins"
        assert "Failed to create plugins folder" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, OSError)
        assert any(error and "Cannot create" in m for m, error in logs.messages)
        # Nothing from the bundle was copied
        assert sorted(p.name for p in game.iterdir()) == ["BepInEx"]
