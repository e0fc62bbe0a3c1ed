"""
Configuration constants for the Grid Route Finder.

All tunable parameters are defined here. Values can be overridden through
environment variables or a .env file in the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of gridroute/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Grid Configuration
# =============================================================================

# Width and height of the (square) grid served over HTTP
GRID_SIZE = int(os.environ.get("GRID_SIZE", "20"))

# =============================================================================
# Search Configuration
# =============================================================================

# Exhaustive search gives up after this many cell expansions
DFS_MAX_EXPANSIONS = int(os.environ.get("DFS_MAX_EXPANSIONS", "2000000"))

# Exhaustive search wall-clock limit in seconds
DFS_TIMEOUT_S = float(os.environ.get("DFS_TIMEOUT_S", "5.0"))

# =============================================================================
# Server Configuration
# =============================================================================

SERVER_HOST = os.environ.get("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("SERVER_PORT", "8080"))

# Origins allowed to call the service ("*" allows any client)
CORS_ALLOWED_ORIGINS = os.environ.get("CORS_ALLOWED_ORIGINS", "*")

# =============================================================================
# Client Configuration
# =============================================================================

SERVICE_URL = os.environ.get("SERVICE_URL", f"http://localhost:{SERVER_PORT}")

# Request timeout in seconds
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))

USER_AGENT = "GridRouteClient/0.1"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
