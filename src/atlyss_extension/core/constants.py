# -*- coding: utf-8 -*-
"""Game constants, bundled paths, and installer settings."""
from pathlib import Path

from ..model_types import GameDescriptor


# Package directory (holds the bundled Dependencies folder and the logo)
BASE_DIR = Path(__file__).resolve().parent.parent

# Game
GAME_ID = "atlyss"
GAME_NAME = "atlyss"
STEAMAPP_ID = "2768430"
EXECUTABLE = "ATLYSS.exe"
REQUIRED_FILES = [EXECUTABLE]
LOGO = "gameart.jpg"
MERGE_MODS = True
GAME = GameDescriptor(GAME_ID, STEAMAPP_ID, GAME_NAME, EXECUTABLE)

# Paths
DEPENDENCIES_DIR = BASE_DIR / "Dependencies"
PLUGINS_SUBDIR = Path("BepInEx") / "plugins"

# Blank: BepInEx loads textures, models and animations as well as plugin dlls
MOD_FILE_EXTENSIONS = ()

# Installer registration
INSTALLER_NAME = "atlyss-mod"
INSTALLER_PRIORITY = 25

# Thread pools
MAX_COPY_WORKERS = 16
