from __future__ import annotations

from apidocs.grouping import ListMultimap, group_endpoints, path_group_name
from apidocs.models import EndpointDescriptor


def test_multimap_preserves_key_and_value_order() -> None:
    multimap: ListMultimap[str, int] = ListMultimap()
    multimap.put("b", 2)
    multimap.put("a", 1)
    multimap.put("b", 1)
    multimap.put("b", 2)

    assert multimap.keys() == ("b", "a")
    assert multimap.get("b") == (2, 1, 2)
    assert multimap.get("missing") == ()
    assert len(multimap) == 4
    assert list(multimap.entries()) == [("b", 2), ("b", 1), ("b", 2), ("a", 1)]
    assert "a" in multimap and "c" not in multimap


def test_sorted_by_is_stable_and_leaves_original_untouched() -> None:
    multimap = ListMultimap([("g", (2, "x")), ("g", (1, "y")), ("g", (2, "z"))])

    ordered = multimap.sorted_by(lambda item: item[0])

    assert ordered.get("g") == ((1, "y"), (2, "x"), (2, "z"))
    assert multimap.get("g") == ((2, "x"), (1, "y"), (2, "z"))


def test_equality_depends_on_order() -> None:
    first = ListMultimap.from_mapping({"a": [1, 2], "b": [3]})
    second = ListMultimap([("a", 1), ("a", 2), ("b", 3)])
    reordered = ListMultimap.from_mapping({"b": [3], "a": [1, 2]})

    assert first == second
    assert first != reordered
    assert not ListMultimap()


def test_group_endpoints_falls_back_to_path_segment() -> None:
    endpoints = [
        EndpointDescriptor("/pets/{id}", "get"),
        EndpointDescriptor("/stores", "GET", group="inventory"),
        EndpointDescriptor("/pets", "POST"),
    ]

    grouping = group_endpoints(endpoints)

    assert grouping.keys() == ("pets", "inventory")
    assert [descriptor.method for descriptor in grouping.get("pets")] == ["GET", "POST"]


def test_path_group_name_skips_templates() -> None:
    assert path_group_name("/{tenant}/Orders/{id}") == "orders"
    assert path_group_name("/") == "root"
