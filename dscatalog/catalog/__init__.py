from .models import Algorithm, Step
from .registry import CATALOG, algorithm_types, get_algorithm, list_algorithms

__all__ = [
    "Algorithm",
    "Step",
    "CATALOG",
    "algorithm_types",
    "get_algorithm",
    "list_algorithms",
]
