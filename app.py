"""WSGI entry point serving the route planner API.

Run directly for local development; production servers import ``app``.
"""

from __future__ import annotations

import logging
import os

from route_planner import create_app

app = create_app()

if __name__ == "__main__":
    debug = os.environ.get("FLASK_ENV", "production") != "production"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    app.run(
        host=os.environ.get("ROUTE_PLANNER_HOST", "0.0.0.0"),
        port=int(os.environ.get("ROUTE_PLANNER_PORT", os.environ.get("PORT", 5000))),
        debug=debug,
        use_reloader=debug,
    )
