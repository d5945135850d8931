"""``waypoint run`` — development server command."""

import argparse

from waypoint.cli._resolve import resolve_or_exit


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it; ``--host``/``--port`` override config."""
    app = resolve_or_exit(args)

    from waypoint.server.dev import run_dev_server

    app._ensure_frozen()
    run_dev_server(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        log_level="debug" if app.config.debug else app.config.log_level,
    )
