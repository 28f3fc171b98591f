# rusuku/core/exceptions.py
# Custom exception hierarchy for Rusuku (pure - no I/O operations)

from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for Rusuku application
class RusukuError(Exception):
    pass


# * Configuration errors
class ConfigurationError(RusukuError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(RusukuError):
    pass


# * Grid shape can't be laid out (rows or cols below 1)
class GridShapeError(RusukuError):
    def __init__(self, message: str, rows: int, cols: int):
        super().__init__(message)
        self.rows = rows
        self.cols = cols

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"rows={self.rows!r}, cols={self.cols!r})"
        )


# * Terminal mode setup/restore or key polling failed
class TerminalError(RusukuError):
    pass
