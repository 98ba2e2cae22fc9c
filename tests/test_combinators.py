"""Tests for jason.combinators module."""

from collections import OrderedDict

import numpy as np
import pandas as pd
import pytest

import jason


class TestOptional:
    """Test the optional combinator."""

    def test_none_is_skipped(self):
        assert jason.optional(jason.string()).validate(None).is_ok

    def test_present_value_is_delegated(self):
        schema = jason.optional(jason.string())
        assert schema.validate("hey").is_ok
        assert schema.validate(42).errors == ["'': the value was not of type 'string'"]

    def test_optional_object_fields(self):
        schema = jason.object(
            {
                "name": jason.string(),
                "friends": jason.optional(jason.array(jason.string())),
            }
        )
        assert schema.validate({"name": "Jon Doe", "friends": ["Jane Doe", "Billy Bob"]}).is_ok
        assert schema.validate({"name": "Jon Doe"}).is_ok
        assert schema.validate({"name": "Jon Doe", "friends": None}).is_ok
        assert schema.validate({"name": "Jon Doe", "friends": ["Jane Doe", 3]}).errors == [
            "'friends[1]': the value was not of type 'string'"
        ]


class TestObject:
    """Test the object combinator."""

    def test_simple_object(self):
        schema = jason.object({"name": jason.string()})
        assert schema.validate({"name": "hey"}).is_ok
        assert not schema.validate({"name": None}).is_ok
        assert not schema.validate({"name": 23}).is_ok
        assert schema.validate({}).errors == ["'name': the value was not of type 'string'"]

    def test_rejects_non_mappings(self):
        schema = jason.object({"name": jason.string()})
        for value in [None, [], [{"name": "hey"}], "name", 3]:
            assert schema.validate(value).errors == ["'': the value was not of type 'object'"]

    def test_accepts_any_mapping(self):
        schema = jason.object({"name": jason.string()})
        assert schema.validate(OrderedDict(name="hey")).is_ok

    def test_every_field_is_checked(self):
        schema = jason.object({"a": jason.string(), "b": jason.string()})
        assert schema.validate({"a": 1, "b": 2}).errors == [
            "'a': the value was not of type 'string'",
            "'b': the value was not of type 'string'",
        ]

    def test_fields_checked_in_declaration_order(self):
        schema = jason.object({"z": jason.number(), "a": jason.number()})
        assert schema.validate({"a": "x", "z": "y"}).errors == [
            "'z': the value is not of type 'number'",
            "'a': the value is not of type 'number'",
        ]

    def test_undeclared_keys_are_ignored(self):
        schema = jason.object({"name": jason.string()})
        assert schema.validate({"name": "hey", "extra": object()}).is_ok

    def test_nested_object_paths(self):
        schema = jason.object({"inner": jason.object({"name": jason.string()})})
        assert schema.validate({"inner": {"name": "hey"}}).is_ok
        assert schema.validate({"inner": {"name": 1}}).errors == [
            "'inner.name': the value was not of type 'string'"
        ]
        assert schema.validate({"name": None}).errors == [
            "'inner': the value was not of type 'object'"
        ]

    def test_deeply_nested_object(self):
        schema = jason.object(
            {
                "inner": jason.object(
                    {"inner": jason.object({"a": jason.boolean(), "b": jason.string()})}
                )
            }
        )
        assert schema.validate({"inner": {"inner": {"a": True, "b": ""}}}).is_ok
        assert schema.validate({"inner": {"inner": {"a": "yes", "b": 0}}}).errors == [
            "'inner.inner.a': the value is not of type 'boolean'",
            "'inner.inner.b': the value was not of type 'string'",
        ]

    def test_user_example(self):
        schema = jason.object(
            {
                "id": jason.string(starts_with="user-"),
                "username": jason.string(length={"min": 4, "max": 16}),
                "age": jason.number(min=0),
            }
        )
        assert schema.validate({"id": "user-0128432", "username": "4to16characters", "age": 23}).is_ok
        assert schema.validate({"id": "user", "username": "asd", "age": -3}).errors == [
            "'id': 'user' did not start with 'user-'",
            "'username': 'asd' had a length less than the minimum length of '4'",
            "'age': '-3' is not greater than or equal to '0'",
        ]

    def test_rejects_non_validator_fields(self):
        with pytest.raises(TypeError, match="Field 'name' must be a Validator"):
            jason.object({"name": "string"})

    def test_scope_stack_is_balanced(self, diagnostics):
        schema = jason.object({"a": jason.object({"b": jason.array(jason.number())})})
        schema.validate({"a": {"b": [1, "x"]}}, diagnostics)
        assert diagnostics.errors == ["'a.b[1]': the value is not of type 'number'"]
        assert diagnostics.scopes == ()

    def test_scope_stack_is_balanced_when_custom_validator_raises(self, diagnostics):
        def boom(value, diagnostics):
            raise RuntimeError("custom failure")

        schema = jason.object(
            {"items": jason.array(jason.object({"name": jason.string(custom_validator=boom)}))}
        )
        with pytest.raises(RuntimeError, match="custom failure"):
            schema.validate({"items": [{"name": "x"}]}, diagnostics)
        assert diagnostics.scopes == ()


class TestArray:
    """Test the array combinator."""

    def test_simple_array(self):
        schema = jason.array(jason.string())
        assert schema.validate([]).is_ok
        assert schema.validate(["hey"]).is_ok
        assert schema.validate(("a", "b")).is_ok

    def test_rejects_non_sequences(self):
        schema = jason.array(jason.string())
        for value in [None, "abc", {"0": "a"}, 3, np.array(5)]:
            assert schema.validate(value).errors == ["'': the value is not of type 'array'"]

    def test_every_item_is_checked(self):
        schema = jason.array(jason.number())
        assert schema.validate([1, "x", 3, "y"]).errors == [
            "'[1]': the value is not of type 'number'",
            "'[3]': the value is not of type 'number'",
        ]

    def test_array_of_objects(self):
        schema = jason.array(jason.object({"name": jason.string()}))
        assert schema.validate([{"name": ""}, {"name": ""}]).is_ok
        assert schema.validate([{"name": ""}, {"name": 1}]).errors == [
            "'[1]name': the value was not of type 'string'"
        ]

    def test_nested_arrays(self):
        schema = jason.array(jason.array(jason.boolean()))
        assert schema.validate([[True], [False, 0]]).errors == [
            "'[1][1]': the value is not of type 'boolean'"
        ]

    def test_exact_length(self):
        schema = jason.array(jason.number(), length=2)
        assert schema.validate([1, 2]).is_ok
        assert schema.validate([1]).errors == ["'': the array length of '1' is not equal to '2'"]

    def test_min_length(self):
        schema = jason.array(jason.number(), length={"min": 2})
        assert schema.validate([1, 2]).is_ok
        assert schema.validate([1]).errors == [
            "'': the array length of '1' is not greater than or equal to '2'"
        ]

    def test_max_length_compares_actual_length(self):
        schema = jason.array(jason.number(), {"length": {"max": 2}})
        assert schema.validate([1, 2]).is_ok
        assert schema.validate([1, 2, 3]).errors == [
            "'': the array length of '3' is not less than or equal to '2'"
        ]

    def test_length_failure_skips_items(self):
        schema = jason.array(jason.number(), length={"min": 3})
        assert len(schema.validate(["a", "b"]).errors) == 1

    def test_numpy_array(self):
        schema = jason.array(jason.number())
        assert schema.validate(np.array([1, 2, 3])).is_ok
        assert schema.validate(np.array(["x"])).errors == [
            "'[0]': the value is not of type 'number'"
        ]

    def test_pandas_series(self):
        schema = jason.array(jason.string(), length={"max": 3})
        assert schema.validate(pd.Series(["a", "b"])).is_ok
        assert not schema.validate(pd.Series(["a", "b", "c", "d"])).is_ok

    def test_pandas_dataframe_is_array_of_records(self):
        schema = jason.array(jason.object({"name": jason.string(), "age": jason.number(min=0)}))
        df = pd.DataFrame({"name": ["Alice", "Bob"], "age": [30, -1]})
        assert schema.validate(df).errors == [
            "'[1]age': '-1' is not greater than or equal to '0'"
        ]


class TestLabelled:
    """Test the labelled combinator."""

    def test_label_prefixes_errors(self):
        schema = jason.labelled("User", jason.object({"name": jason.string()}))
        assert schema.validate({"name": 1}).errors == [
            "'User.name': the value was not of type 'string'"
        ]

    def test_label_on_primitive(self):
        assert jason.labelled("Age", jason.number()).validate("x").errors == [
            "'Age': the value is not of type 'number'"
        ]

    def test_label_with_array_items(self):
        schema = jason.labelled("Tags", jason.array(jason.string()))
        assert schema.validate(["a", 1]).errors == ["'Tags[1]': the value was not of type 'string'"]

    def test_label_is_not_popped(self, diagnostics):
        schema = jason.labelled("User", jason.object({"name": jason.string()}))
        schema.validate({"name": "hey"}, diagnostics)
        assert diagnostics.is_ok
        assert diagnostics.scopes == ("User",)

    def test_label_prefixes_later_errors_in_the_same_run(self, diagnostics):
        jason.labelled("User", jason.string()).validate("ok", diagnostics)
        jason.number().validate("x", diagnostics)
        assert diagnostics.errors == ["'User': the value is not of type 'number'"]


class TestAccumulation:
    """Test threading one diagnostics instance through several validations."""

    def test_errors_accumulate_across_calls(self, diagnostics):
        jason.string().validate(1, diagnostics)
        jason.object({"n": jason.number()}).validate({"n": "x"}, diagnostics)
        assert diagnostics.errors == [
            "'': the value was not of type 'string'",
            "'n': the value is not of type 'number'",
        ]

    def test_validators_are_reusable(self):
        schema = jason.object({"name": jason.string()})
        assert not schema.validate({"name": 1}).is_ok
        assert schema.validate({"name": "ok"}).is_ok

    def test_validation_does_not_mutate_input(self):
        value = {"name": 1, "tags": ["a", 2]}
        schema = jason.object(
            {
                "name": jason.string(),
                "tags": jason.array(jason.string()),
                "missing": jason.optional(jason.string()),
            }
        )
        schema.validate(value)
        assert value == {"name": 1, "tags": ["a", 2]}
