# rusuku/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (RUSUKU_CONFIG may point at a config file)
load_dotenv()

from ..config.settings import settings_manager
from ..core.output import get_output_manager


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
    help="Terminal dashboard w/ a pausable elapsed-time header & a ruled grid body",
)


# * Load settings & launch the dashboard when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..ui.theming.console_theme import auto_initialize_theme

    auto_initialize_theme(ctx.obj.theme)

    # must be after settings load to check dev_mode
    from ..core.verbose import init_verbose

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    dev_mode = ctx.obj.dev_mode if hasattr(ctx.obj, "dev_mode") else False
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode)

    output = get_output_manager()
    output.start_session()
    ctx.call_on_close(output.end_session)

    if ctx.invoked_subcommand is None:
        from .commands.run import launch_dashboard

        launch_dashboard(ctx.obj)


# ! import command modules here to avoid circular import w/ app object
from .commands import run as _run  # noqa: F401, E402
from .commands import snapshot as _snapshot  # noqa: F401, E402
from .commands import keys as _keys  # noqa: F401, E402
from .commands import settings as _settings  # noqa: F401, E402
