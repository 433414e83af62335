import inspect
import os
import re
import sys


def get_effective_config_value(name: str, config: dict) -> str | None:
    """
    Returns the effective configuration value for a given name, following priority:
        1. Command-line parameter (--name=value)
        2. Config file value (case-insensitive)
        3. System environment variable (case-insensitive)

    Args:
        name (str): Variable name (case-insensitive, e.g. "APP_URL")
        config (dict): Configuration dictionary loaded from config.json

    Returns:
        str | None: Effective value or None if not found
    """
    name_lower = name.lower()

    # 1️ Command-line via raw sys.argv (--name=value)
    for arg in sys.argv:
        if arg.startswith("--") and "=" in arg:
            arg_name, arg_val = arg[2:].split("=", 1)
            if arg_name.lower() == name_lower:
                return arg_val.strip()

    # 2️ Config file
    for key, value in config.items():
        if key.lower() == name_lower and value is not None:
            return str(value)

    # 3️ Environment variable
    for key, value in os.environ.items():
        if key.lower() == name_lower:
            return str(value)

    return None


def get_assigned_field_name(class_name: str = "DslLocator") -> tuple[str, str] | None:
    """
    Walks the call stack and finds the 'self.<field> = <class_name>(...)' line
    that is being executed. Returns (field name, file name) or None.
    """
    pattern = re.compile(rf"self\.(\w+)\s*=\s*{class_name}\(")

    for frame_info in inspect.stack():
        if frame_info.code_context:
            line = frame_info.code_context[0].strip()
            match = pattern.match(line)
            if match:
                return match.group(1), frame_info.filename
    return None


def to_bool(value, default: bool = False) -> bool:
    """Converts config and command line flag values ("true", "false", bools) to bool."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"
