from enum import Enum


class Theme(str, Enum):
    """Color themes offered by the settings modal."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
