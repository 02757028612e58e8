"""Core types: results, exit codes, display preferences and config."""

from .config import Config, ConfigError, load_config, load_config_or_default, save_config
from .display import Activity, ColorTheme, DisplayMode, TimeDisplayConfig, TimeFormat
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    "save_config",
    # display
    "Activity",
    "ColorTheme",
    "DisplayMode",
    "TimeDisplayConfig",
    "TimeFormat",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
