import pytest

from confkeeper.core.document import merge_documents


class TestMergeDocuments:
    """Structural merge of default and user documents."""

    def test_user_values_override_and_defaults_backfill(self):
        base = {"a": 1, "b": "x", "c": [1, 2]}
        assert merge_documents(base, {"a": 5}) == {"a": 5, "b": "x", "c": [1, 2]}

    def test_lists_are_replaced_not_combined(self):
        assert merge_documents({"list": [1, 2, 3]}, {"list": [9]}) == {"list": [9]}

    def test_empty_user_list_replaces_default(self):
        assert merge_documents({"list": [1, 2, 3]}, {"list": []}) == {"list": []}

    def test_nested_objects_merge_recursively(self):
        base = {"window": {"width": 800, "height": 600}, "title": "App"}
        overlay = {"window": {"height": 1024}}
        assert merge_documents(base, overlay) == {
            "window": {"width": 800, "height": 1024},
            "title": "App",
        }

    def test_null_user_values_keep_defaults(self):
        base = {"name": "default", "nested": {"x": 1}}
        assert merge_documents(base, {"name": None, "nested": None}) == base

    def test_type_change_takes_user_value(self):
        assert merge_documents({"value": {"x": 1}}, {"value": 3}) == {"value": 3}
        assert merge_documents({"value": [1]}, {"value": {"x": 1}}) == {"value": {"x": 1}}

    def test_user_only_keys_are_carried(self):
        assert merge_documents({"a": 1}, {"extra": True}) == {"a": 1, "extra": True}

    def test_inputs_are_not_modified(self):
        base = {"nested": {"items": [1, 2]}}
        overlay = {"nested": {"items": [3]}, "new": {"k": "v"}}
        result = merge_documents(base, overlay)

        result["nested"]["items"].append(4)
        result["new"]["k"] = "changed"

        assert base == {"nested": {"items": [1, 2]}}
        assert overlay == {"nested": {"items": [3]}, "new": {"k": "v"}}

    @pytest.mark.parametrize("base,overlay,expected", [
        (1, 2, 2),
        ("a", None, "a"),
        ([1, 2], [3], [3]),
        (None, {"a": 1}, {"a": 1}),
    ])
    def test_non_object_roots(self, base, overlay, expected):
        assert merge_documents(base, overlay) == expected
