"""Tests for the container serializer: ordering, omission and error rules."""

import json
import sys
from collections import OrderedDict
from types import MappingProxyType

import pytest

from json_normalize.api import canonicalize, canonicalize_async
from json_normalize.codes import ErrorCode
from json_normalize.errors import EncodingError
from json_normalize.kernel.serializer import assemble_array, assemble_object, serialize_node
from json_normalize.kernel.undefined import UNDEFINED


class TestKeyOrdering:
    """Objects serialize identically regardless of insertion order."""

    def test_simple_object(self):
        assert canonicalize({"foo": "bar", "bar": "baz"}) == '{"bar":"baz","foo":"bar"}'

    def test_nested_object(self):
        value = {"foo": "bar", "b": 1, "a": {"z": 0, "y": 9}}
        assert canonicalize(value) == '{"a":{"y":9,"z":0},"b":1,"foo":"bar"}'

    def test_objects_inside_arrays(self):
        assert canonicalize([{"z": 2, "y": 1}, {"y": 1, "z": 2}]) == '[{"y":1,"z":2},{"y":1,"z":2}]'

    def test_nested_arrays_of_objects(self):
        row = [{"z": 2, "y": 1}, {"z": 2, "y": 1}, {"y": 1, "z": 2}]
        expected_row = '[{"y":1,"z":2},{"y":1,"z":2},{"y":1,"z":2}]'
        assert canonicalize([row, row, row]) == f"[{expected_row},{expected_row},{expected_row}]"

    def test_deep_tree(self):
        leaf = lambda: {"z": {"a": 1}, "y": {"a": 1}}  # noqa: E731
        value = {"z": {"z": leaf(), "y": leaf()}, "y": {"z": leaf(), "y": leaf()}}
        inner = '{"y":{"a":1},"z":{"a":1}}'
        expected = f'{{"y":{{"y":{inner},"z":{inner}}},"z":{{"y":{inner},"z":{inner}}}}}'
        assert canonicalize(value) == expected

    def test_permutations_are_equal(self):
        a = {"one": 1, "two": [1, {"x": 1, "w": 2}], "three": {"c": None, "b": True}}
        b = {"three": {"b": True, "c": None}, "two": [1, {"w": 2, "x": 1}], "one": 1}
        assert canonicalize(a) == canonicalize(b)

    def test_array_order_matters(self):
        assert canonicalize([1, 2]) != canonicalize([2, 1])
        assert canonicalize([3, 1, 2]) == "[3,1,2]"


class TestMemberFragmentSort:
    """Members are sorted on the rendered "key":value text, not the bare key."""

    def test_prefix_key_sorts_after_longer_key(self):
        # '"a":' vs '"a!"': '"' (0x22) sorts after '!' (0x21)
        assert canonicalize({"a": 1, "a!": 2}) == '{"a!":2,"a":1}'

    def test_sorting_by_key_would_differ(self):
        value = {"a": 1, "a!": 2}
        by_key = json.dumps(value, sort_keys=True, separators=(",", ":"))
        assert by_key == '{"a":1,"a!":2}'
        assert canonicalize(value) != by_key

    def test_utf16_code_unit_order(self):
        """Astral characters (surrogate pairs) sort before U+FFFF, as in JavaScript."""
        value = {"\uffff": 1, "\U0001f600": 2}
        assert canonicalize(value) == '{"\U0001f600":2,"\uffff":1}'


class TestOmissionRules:
    """Undefined and callables: dropped from objects, null in arrays."""

    def test_drop_undefined_member(self):
        assert canonicalize({"a": 1, "b": UNDEFINED}) == canonicalize({"a": 1})

    def test_null_member_kept(self):
        assert canonicalize({"a": 1, "b": 2, "c": UNDEFINED, "d": None}) == '{"a":1,"b":2,"d":null}'

    def test_array_null_substitution(self):
        assert canonicalize([1, UNDEFINED, 3]) == canonicalize([1, None, 3]) == "[1,null,3]"

    def test_array_length_preserved(self):
        assert canonicalize(["a", "b", UNDEFINED, "c"]) == '["a","b",null,"c"]'

    def test_nested_omission(self):
        value = {"e": {"a": 1, "c": UNDEFINED, "d": None}, "c": UNDEFINED}
        assert canonicalize(value) == '{"e":{"a":1,"d":null}}'

    def test_all_members_dropped(self):
        assert canonicalize({"x": UNDEFINED, "y": print}) == "{}"


class TestContainers:
    """Container shapes and edge cases."""

    def test_empty_containers(self):
        assert canonicalize({}) == "{}"
        assert canonicalize([]) == "[]"
        assert canonicalize(()) == "[]"

    def test_tuple_is_array(self):
        assert canonicalize((1, "a")) == '[1,"a"]'

    def test_any_mapping_is_object(self):
        assert canonicalize(OrderedDict([("b", 1), ("a", 2)])) == '{"a":2,"b":1}'
        assert canonicalize(MappingProxyType({"k": [1]})) == '{"k":[1]}'

    def test_non_string_keys_coerced(self):
        assert canonicalize({2: "b", 1: "a"}) == '{"1":"a","2":"b"}'

    def test_keys_are_escaped(self):
        assert canonicalize({'q"k': 1}) == '{"q\\"k":1}'

    def test_shared_reference_is_not_circular(self):
        shared = [1]
        assert canonicalize({"x": shared, "y": shared}) == '{"x":[1],"y":[1]}'

    def test_round_trip(self):
        value = {"b": [1, 2.5, "three", None, True], "a": {"nested": {"deep": []}}}
        assert json.loads(canonicalize(value)) == value

    def test_input_not_mutated(self):
        value = {"b": [3, 2], "a": {"y": 1, "x": 2}}
        snapshot = json.dumps(value)
        canonicalize(value)
        assert json.dumps(value) == snapshot


class TestEncodingErrors:
    """Errors carry a code and the path of the failing node."""

    def test_circular_object(self):
        value = {"a": 1}
        value["self"] = value
        with pytest.raises(EncodingError) as exc_info:
            canonicalize(value)
        assert exc_info.value.code == ErrorCode.CIRCULAR_REFERENCE
        assert exc_info.value.path == "self"

    def test_circular_array(self):
        value = [1]
        value.append(value)
        with pytest.raises(EncodingError) as exc_info:
            canonicalize(value)
        assert exc_info.value.code == ErrorCode.CIRCULAR_REFERENCE
        assert exc_info.value.path == "[1]"

    def test_unsupported_type_path(self):
        with pytest.raises(EncodingError) as exc_info:
            canonicalize({"a": {"b": [1, {2}]}})
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_TYPE
        assert exc_info.value.path == "a.b[1]"

    def test_invalid_key(self):
        with pytest.raises(EncodingError) as exc_info:
            canonicalize({"a": {(1, 2): 1}})
        assert exc_info.value.code == ErrorCode.INVALID_KEY

    def test_first_failure_in_depth_first_order(self):
        with pytest.raises(EncodingError) as exc_info:
            canonicalize([{"ok": 1}, {"bad": {1}}, {2}])
        assert exc_info.value.path == "[1].bad"


class TestDeepNesting:
    """Nesting depth is not bounded by the interpreter recursion limit."""

    def test_deeper_than_recursion_limit(self):
        depth = sys.getrecursionlimit() * 3
        value = []
        for _ in range(depth):
            value = [value]
        assert canonicalize(value) == "[" * (depth + 1) + "]" * (depth + 1)

    @pytest.mark.asyncio
    async def test_sync_matches_async_at_depth(self):
        value = {"leaf": True}
        for i in range(3000):
            value = {"c": value, "i": i}
        result = canonicalize(value)
        assert result == await canonicalize_async(value)
        assert result.startswith('{"c":{"c":')
        assert '{"c":{"leaf":true},"i":0}' in result
        assert result.endswith(',"i":2999}')


class TestWalkProtocol:
    """The node walk yields child walks and is resumed with their fragments."""

    def test_literal_walk_finishes_immediately(self):
        walk = serialize_node(None, 5)
        with pytest.raises(StopIteration) as stop:
            next(walk)
        assert stop.value.value == "5"

    def test_container_walk_fans_out_then_assembles(self):
        walk = serialize_node(None, {"b": 1, "a": 2, "c": 3})
        children = next(walk)
        assert len(children) == 3
        with pytest.raises(StopIteration) as stop:
            walk.send(["1", "2", None])
        assert stop.value.value == '{"a":2,"b":1}'

    def test_assemble_helpers(self):
        assert assemble_array([]) == "[]"
        assert assemble_array(["1", None]) == "[1,null]"
        assert assemble_object([], []) == "{}"
        assert assemble_object(["z", "y"], ["1", None]) == '{"z":1}'
