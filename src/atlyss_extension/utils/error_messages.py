"""User-friendly error message templates."""

from ..core.exceptions import DependencyInstallError, GameNotFoundError, NoInstallableContentError
from .symbols import LogSymbols


def get_user_friendly_error(error_type, error_details=""):
    """Convert error type to user-friendly message with actionable steps."""
    messages = {
        'game_not_found': (
            f"{LogSymbols.ERROR_BOLD} ATLYSS not found\n\n"
            "The game could not be located through Steam.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Make sure ATLYSS is installed through Steam\n"
            f"{LogSymbols.BULLET} Start the game once so Steam finishes the install\n"
            f"{LogSymbols.BULLET} Set the game folder manually in the mod manager"
        ),

        'dependency_copy': (
            f"{LogSymbols.ERROR_BOLD} BepInEx setup failed\n\n"
            "A bundled dependency could not be copied into the game folder.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Close ATLYSS if it's running\n"
            f"{LogSymbols.BULLET} Check the game folder is writable\n"
            f"{LogSymbols.BULLET} Reinstall the extension if its files are missing"
        ),

        'permission_denied': (
            f"{LogSymbols.ERROR_BOLD} Permission denied\n\n"
            "The extension can't write to the ATLYSS folder.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Run the mod manager as Administrator (Windows)\n"
            f"{LogSymbols.BULLET} Check folder permissions\n"
            f"{LogSymbols.BULLET} Close ATLYSS if it's running"
        ),

        'disk_space': (
            f"{LogSymbols.ERROR_BOLD} Not enough disk space\n\n"
            "Your drive doesn't have enough free space for the BepInEx files.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Free up some space on the game drive\n"
            f"{LogSymbols.BULLET} Remove some old mods first"
        ),

        'no_installable_content': (
            LogSymbols.WARNING + " Nothing to install\n\n"
            "The archive doesn't contain any file this installer can place.\n\n"
            "Check the mod page: the download may be a folder-only archive\n"
            "or meant for a different game."
        ),
    }

    default_message = (
        f"{LogSymbols.ERROR_BOLD} An error occurred\n\n"
        f"Technical details: {error_details}\n\n"
        f"Try:\n"
        f"{LogSymbols.BULLET} Check the log for more information\n"
        f"{LogSymbols.BULLET} Restart the mod manager"
    )

    return messages.get(error_type, default_message)


def suggest_fix_for_error(exception):
    if isinstance(exception, GameNotFoundError):
        return 'game_not_found'
    elif isinstance(exception, NoInstallableContentError):
        return 'no_installable_content'
    elif isinstance(exception, DependencyInstallError):
        cause = exception.__cause__
        if isinstance(cause, PermissionError):
            return 'permission_denied'
        if isinstance(cause, OSError) and 'No space left' in str(cause):
            return 'disk_space'
        return 'dependency_copy'

    # File system errors
    elif isinstance(exception, PermissionError):
        return 'permission_denied'
    elif isinstance(exception, OSError):
        if 'No space left' in str(exception):
            return 'disk_space'
        return 'permission_denied'

    return None  # Use default message
