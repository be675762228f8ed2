import dataclasses

import pytest

from dscatalog.catalog import CATALOG, Algorithm, algorithm_types, get_algorithm, list_algorithms
from dscatalog.catalog import registry
from dscatalog.error_handling import AlgorithmNotFoundError, DSCatalogError
from dscatalog.structures import array_ops

EXPECTED_KEYS = [
    "array-insert", "array-delete", "array-search", "array-update",
    "linkedlist-insert", "linkedlist-delete", "linkedlist-search", "linkedlist-update",
    "tree-insert", "tree-delete", "tree-search", "tree-traversal",
]


def test_catalog_has_all_operations_in_order():
    assert list(CATALOG) == EXPECTED_KEYS
    assert [a.key for a in list_algorithms()] == EXPECTED_KEYS


def test_list_algorithms_by_type():
    assert [a.key for a in list_algorithms("linkedlist")] == EXPECTED_KEYS[4:8]
    assert all(a.type == "tree" for a in list_algorithms("tree"))
    assert algorithm_types() == ["array", "linkedlist", "tree"]


def test_get_algorithm():
    algorithm = get_algorithm("array-update")
    assert isinstance(algorithm, Algorithm)
    assert algorithm.title == "Array Update"
    assert algorithm.time_complexity == "O(1)"
    assert [s.title for s in algorithm.steps] == ["Select Element", "Update Value", "Complete Update"]


def test_get_unknown_algorithm():
    with pytest.raises(AlgorithmNotFoundError) as excinfo:
        get_algorithm("heap-insert")
    assert "heap-insert" in str(excinfo.value)
    assert excinfo.value.details == {"key": "heap-insert"}
    # Still catchable as the base error and as a lookup miss
    assert isinstance(excinfo.value, DSCatalogError)
    assert isinstance(excinfo.value, KeyError)


@pytest.mark.parametrize("key,function_name", [
    ("array-insert", "def insert_at"),
    ("array-update", "def update"),
    ("linkedlist-delete", "def delete_node"),
    ("linkedlist-search", "def search_node"),
    ("tree-delete", "def delete"),
    ("tree-traversal", "def _postorder"),
])
def test_code_samples_come_from_implementation(key, function_name):
    assert function_name in get_algorithm(key).code


@pytest.mark.parametrize("key,space", [
    ("array-insert", "O(n)"),
    ("array-delete", "O(n)"),
    ("array-search", "O(1)"),
    ("array-update", "O(1)"),
])
def test_array_space_complexity_matches_copying_operations(key, space):
    # insert_at and delete_at return a new list
    assert get_algorithm(key).space_complexity == space


def test_code_sample_falls_back_without_source(monkeypatch):
    def no_source(obj):
        raise OSError("could not get source code")

    monkeypatch.setattr(registry.inspect, "getsource", no_source)
    sample = registry._code_sample(array_ops.search, array_ops.update)
    assert sample == (
        f"{registry.CODE_UNAVAILABLE}: search\n\n{registry.CODE_UNAVAILABLE}: update"
    )


def test_every_entry_is_complete():
    for algorithm in list_algorithms():
        assert algorithm.title and algorithm.description
        assert algorithm.time_complexity.startswith("O(")
        assert algorithm.space_complexity.startswith("O(")
        assert len(algorithm.steps) >= 3
        assert algorithm.steps[-1].title.startswith("Complete")


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CATALOG["new"] = get_algorithm("tree-insert")  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        get_algorithm("tree-insert").title = "changed"  # type: ignore[misc]
