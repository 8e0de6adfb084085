"""Logging setup for the CLI.

Library modules only create module-level loggers; handlers are installed
once by the CLI entry point.
"""

import logging

from rich.logging import RichHandler

from whichpm.utils.formatting import err_console


def setup_logging(verbose: bool = False) -> None:
    """Route all whichpm logging through a Rich handler on stderr.

    Args:
        verbose: Show INFO records (detection steps) instead of warnings only.
    """
    level = logging.INFO if verbose else logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
