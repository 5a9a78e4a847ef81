"""
config.py — Defaults for the web front end and the engine.

Loaded into Flask with ``app.config.from_object``; any value can be
overridden from the environment with a ``MATHAPP_`` prefix, e.g.
``MATHAPP_X_MIN=-5`` or ``MATHAPP_PORT=9000``.
"""

# Graph domain and resolution
X_MIN = -10.0
X_MAX = 10.0
GRAPH_POINTS = 600
PREVIEW_POINTS = 400

# Seconds to wait for the algebra engine to finish loading
ENGINE_LOAD_TIMEOUT = 7.0

# Set to False when the page has no graph container
GRAPH_SURFACE = True

HOST = '127.0.0.1'
PORT = 8000
