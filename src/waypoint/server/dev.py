"""Development server.

Runs the live waypoint App under uvicorn in a single process.
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    """Attach a stream handler to the ``waypoint`` logger tree.

    Safe to call more than once; the handler is only added the first time.
    """
    root = logging.getLogger("waypoint")
    root.setLevel(level.upper())
    if not any(getattr(h, "_waypoint", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._waypoint = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    log_level: str = "info",
) -> None:
    """Serve *app* with uvicorn until interrupted."""
    import uvicorn

    configure_logging(log_level)
    uvicorn.run(app, host=host, port=port, log_level=log_level, lifespan="on")
