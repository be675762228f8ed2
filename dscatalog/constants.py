"""Constants for ds-catalog. Tunable values live in data/default.json"""

from __future__ import annotations

# Sentinel returned by positional searches on a miss
NOT_FOUND = -1

ALGORITHM_TYPES = ["array", "linkedlist", "tree"]

TRAVERSAL_ORDERS = ["inorder", "preorder", "postorder"]

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Error message templates
ERRORS = {
    "INDEX_OUT_OF_RANGE": "Index out of bounds: {index} (valid range {low}..{high})",
    "ALGORITHM_NOT_FOUND": "Unknown algorithm: {key}. Available: {available}",
    "INVALID_TRAVERSAL_ORDER": "Traversal order must be one of: {orders}",
    "INVALID_LOG_LEVEL": "DSCATALOG_LOG_LEVEL must be one of: {levels}",
    "INVALID_STRUCTURE": "Structure must be one of: {structures}",
    "MISSING_DEMO_VALUES": "Config has no demo values for '{structure}'",
}
