# rusuku/cli/decorators.py
# CLI decorator mapping Rusuku errors to friendly Rich messages & exit codes

import functools
from typing import Callable, TypeVar, Any, cast

from ..core.debug import debug_error
from ..core.exceptions import (
    RusukuError,
    ConfigurationError,
    JSONParsingError,
    GridShapeError,
    TerminalError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling Rusuku errors in CLI commands w/ Rich output
# * Terminal state is already restored by the session context managers when these propagate
def handle_rusuku_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..rusuku_io.console import console

        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            debug_error(e, func.__name__)
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except JSONParsingError as e:
            debug_error(e, func.__name__)
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except GridShapeError as e:
            debug_error(e, func.__name__)
            console.print(format_error_message("Grid Error", str(e)))
            raise SystemExit(1)
        except TerminalError as e:
            debug_error(e, func.__name__)
            console.print(format_error_message("Terminal Error", str(e)))
            raise SystemExit(1)
        except RusukuError as e:
            debug_error(e, func.__name__)
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
