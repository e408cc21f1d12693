"""Minecraft launcher profiles and their data directories."""

import os
import platform
from enum import Enum
from pathlib import Path


def _config_dir() -> Path | None:
    """Per-user configuration directory of the current platform."""
    system = platform.system().lower()
    if system == "windows":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None
    if system == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path.home() / ".config"


class Launcher(str, Enum):
    """Where the files to scan live."""

    MODRINTH = "modrinth"
    PRISM = "prism"
    ATLAUNCHER = "atlauncher"
    VANILLA = "vanilla"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def data_directory(self) -> Path | None:
        """Directory holding this launcher's instances; None for ``custom``."""
        parts = _DATA_DIRS.get(self)
        if parts is None:
            return None
        base = _config_dir()
        if base is None:
            return None
        return base.joinpath(*parts)


_LABELS = {
    Launcher.MODRINTH: "Modrinth App",
    Launcher.PRISM: "Prism Launcher",
    Launcher.ATLAUNCHER: "ATLauncher",
    Launcher.VANILLA: "Vanilla",
    Launcher.CUSTOM: "Custom directory",
}

_DATA_DIRS = {
    Launcher.MODRINTH: ("com.modrinth.theseus", "profiles"),
    Launcher.PRISM: ("PrismLauncher", "instances"),
    Launcher.ATLAUNCHER: ("ATLauncher",),
    Launcher.VANILLA: (".minecraft",),
}
