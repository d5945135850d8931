"""``waypoint routes`` — list registered routes.

Prints METHOD, PATH and HANDLER in registration order, which is also
the order dispatch tests them in.
"""

import argparse

from waypoint.cli._resolve import resolve_or_exit


def run_routes(args: argparse.Namespace) -> None:
    app = resolve_or_exit(args)
    app._ensure_frozen()

    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [(str(route.method), route.path, route.handler_name) for route in routes]

    width_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    width_path = max(4, *(len(r[1]) for r in rows))  # "PATH" header

    fmt = f"{{:<{width_method}}}  {{:<{width_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = width_method + width_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler_name in rows:
        print(fmt.format(method, path, handler_name))
