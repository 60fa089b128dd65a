"""
Configuration constants for the Pathtrace backend.

Search limits, editor defaults and service settings are defined here.
Operational values can be overridden through environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Bundled data ships inside the package so installed copies find it
PACKAGE_DIR = Path(__file__).parent

SAMPLES_DIR = PACKAGE_DIR / "samples"
SAMPLE_GRAPH_PATH = SAMPLES_DIR / "sample_graph.json"

# =============================================================================
# Search Configuration
# =============================================================================

# Step budget for one run (the initialize step counts as the first step)
MAX_STEPS = int(os.environ.get("PATHTRACE_MAX_STEPS", "50"))

# Hard upper bound for a caller-supplied budget
MAX_STEPS_CEILING = 500

# Algorithm used when the caller does not pick one
DEFAULT_ALGORITHM = "astar"

# =============================================================================
# Editor Configuration
# =============================================================================

# New nodes get a random integer heuristic in this inclusive range
NEW_NODE_HEURISTIC_RANGE = (1, 10)

# New edges get a random integer cost in this inclusive range
NEW_EDGE_COST_RANGE = (1, 5)

# Candidate ids for auto-named nodes, tried in order
NODE_ID_ALPHABET = tuple(chr(c) for c in range(ord("A"), ord("Z") + 1))

# Never handed out automatically (conventional start / goal names)
RESERVED_NODE_IDS = ("S", "G")

# =============================================================================
# API Configuration
# =============================================================================

API_TITLE = "Pathtrace"
API_VERSION = "0.1.0"

# Comma separated list, "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("PATHTRACE_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
