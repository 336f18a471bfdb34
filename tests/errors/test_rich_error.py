# tests/errors/test_rich_error.py
"""
RichError value tests - construction, copy-on-write mutators, accessors
"""

import copy
import pickle
from datetime import datetime, timezone

import pytest

from richerror import OutputFormat, ReadOnlyRichError, RichError


def make_error():
    return (
        RichError.create("NotFound", "resource missing")
        .add_metadata("id", "42")
        .add_tag("http")
        .add_error(ValueError("inner boom"))
    )


MUTATIONS = {
    "with_stack": lambda e: e.with_stack(),
    "with_metadata": lambda e: e.with_metadata({"other": 1}),
    "add_metadata": lambda e: e.add_metadata("extra", [1, 2]),
    "with_errors": lambda e: e.with_errors([KeyError("k"), None]),
    "add_error": lambda e: e.add_error(RuntimeError("second")),
    "add_error_none": lambda e: e.add_error(None),
    "with_tags": lambda e: e.with_tags(["db", "retry"]),
    "add_tag": lambda e: e.add_tag("retry"),
    "add_source": lambda e: e.add_source("remote.py"),
    "add_function": lambda e: e.add_function("handler"),
    "add_line_number": lambda e: e.add_line_number("99"),
    "set_custom_output_function": lambda e: e.set_custom_output_function(lambda err: "custom"),
    "set_output_format": lambda e: e.set_output_format(OutputFormat.SHORT),
}


class TestConstruction:
    """create() stamps the time and leaves everything else absent"""

    def test_create_sets_code_message_and_utc_timestamp(self):
        before = datetime.now(timezone.utc)
        err = RichError.create("NotFound", "resource missing")
        after = datetime.now(timezone.utc)

        assert err.code == "NotFound"
        assert err.message == "resource missing"
        assert err.occurred_at.tzinfo is timezone.utc
        assert before <= err.occurred_at <= after

    def test_optional_fields_start_absent(self):
        err = RichError.create("NotFound", "resource missing")

        assert err.stack is None
        assert err.tags is None
        assert err.metadata is None
        assert err.inner_errors is None
        assert err.source == "" and err.function == "" and err.line == ""
        assert err.output_format == OutputFormat.NOT_SPECIFIED
        assert err.has_stack() is False

    def test_is_raisable_exception(self):
        with pytest.raises(RichError) as excinfo:
            raise RichError.create("Boom", "it broke")

        assert excinfo.value.get_error_code() == "Boom"
        assert excinfo.value.args == ("it broke",)

    def test_satisfies_read_only_contract(self):
        assert isinstance(RichError.create("X", "y"), ReadOnlyRichError)
        assert not isinstance(ValueError("plain"), ReadOnlyRichError)

    def test_fields_cannot_be_rebound(self):
        err = RichError.create("NotFound", "resource missing")

        with pytest.raises(AttributeError):
            err.code = "Other"
        with pytest.raises(AttributeError):
            err.occurred_at = datetime.now(timezone.utc)
        assert err.code == "NotFound"

    def test_direct_construction_freezes_containers(self):
        tags = ["a"]
        metadata = {"k": "v"}
        err = RichError(code="X", message="y", tags=tags, metadata=metadata)
        tags.append("b")
        metadata["k"] = "changed"

        assert err.tags == ("a",)
        assert err.get_metadata_item("k") == ("v", True)


class TestCopyOnWrite:
    """Every mutator returns a new value and never touches the receiver"""

    @pytest.mark.parametrize("name", sorted(MUTATIONS))
    def test_mutator_leaves_original_untouched(self, name):
        original = make_error()
        snapshot = original.to_dict()

        updated = MUTATIONS[name](original)

        assert isinstance(updated, RichError)
        assert updated is not original
        assert original.to_dict() == snapshot

    @pytest.mark.parametrize("name", sorted(MUTATIONS))
    def test_mutator_keeps_code_and_timestamp(self, name):
        original = make_error()

        updated = MUTATIONS[name](original)

        assert updated.code == original.code
        assert updated.occurred_at == original.occurred_at

    def test_mutators_chain(self):
        err = (
            RichError.create("Timeout", "upstream timed out")
            .add_tag("http")
            .add_tag("retry")
            .add_metadata("host", "api.local")
            .add_metadata("seconds", 30)
            .add_source("client.py")
            .add_function("fetch")
            .add_line_number(12)
        )

        assert err.get_tags() == ("http", "retry")
        assert dict(err.get_metadata()) == {"host": "api.local", "seconds": 30}
        assert (err.get_source(), err.get_function(), err.get_line_number()) == ("client.py", "fetch", "12")

    def test_two_holders_do_not_alias(self):
        base = RichError.create("X", "y").add_metadata("shared", 1)
        left = base.add_metadata("left", True)
        right = base.add_metadata("right", True)

        assert set(left.metadata) == {"shared", "left"}
        assert set(right.metadata) == {"shared", "right"}
        assert set(base.metadata) == {"shared"}


class TestMetadata:
    def test_add_then_get_returns_value_and_true(self):
        err = RichError.create("X", "y").add_metadata("id", "42")

        assert err.get_metadata_item("id") == ("42", True)

    def test_unset_key_returns_false(self):
        err = RichError.create("X", "y").add_metadata("id", "42")

        assert err.get_metadata_item("missing") == (None, False)
        assert RichError.create("X", "y").get_metadata_item("id") == (None, False)

    def test_add_metadata_upserts(self):
        err = RichError.create("X", "y").add_metadata("id", 1).add_metadata("id", 2)

        assert dict(err.metadata) == {"id": 2}

    def test_with_metadata_replaces_wholesale_and_copies(self):
        source = {"a": 1}
        err = RichError.create("X", "y").add_metadata("old", True).with_metadata(source)
        source["b"] = 2

        assert dict(err.metadata) == {"a": 1}

    def test_with_metadata_none_clears(self):
        err = RichError.create("X", "y").add_metadata("a", 1).with_metadata(None)

        assert err.get_metadata() is None

    def test_metadata_is_read_only(self):
        err = RichError.create("X", "y").add_metadata("a", 1)

        with pytest.raises(TypeError):
            err.metadata["a"] = 2


class TestInnerErrors:
    def test_add_error_none_is_noop(self):
        fresh = RichError.create("X", "y")
        assert fresh.add_error(None).inner_errors is None

        err = fresh.add_error(ValueError("one"))
        assert len(err.add_error(None).get_errors()) == 1

    def test_with_errors_appends_and_skips_none(self):
        first = ValueError("first")
        second = KeyError("second")
        err = RichError.create("X", "y").add_error(first).with_errors([None, second])

        assert err.get_errors() == [first, second]

    def test_rich_errors_nest(self):
        inner = RichError.create("DbDown", "database unavailable")
        outer = RichError.create("RequestFailed", "request failed").add_error(inner)

        assert outer.get_errors()[0] is inner


class TestTags:
    def test_with_tags_replaces(self):
        err = RichError.create("X", "y").add_tag("old").with_tags(["a", "b"])

        assert err.get_tags() == ("a", "b")

    def test_add_tag_appends(self):
        err = RichError.create("X", "y").add_tag("a").add_tag("b")

        assert err.get_tags() == ("a", "b")


class TestSerialization:
    def test_to_dict_shape(self):
        err = make_error().add_source("svc.py").add_line_number("7")

        data = err.to_dict()

        assert data["code"] == "NotFound"
        assert data["occurredAt"] == err.occurred_at.isoformat()
        assert data["source"] == "svc.py"
        assert "function" not in data
        assert data["tags"] == ["http"]
        assert data["innerErrors"] == ["inner boom"]
        assert data["metaData"] == {"id": "42"}
        assert "stack" not in data

    def test_from_dict_restores_value(self):
        inner = RichError.create("DbDown", "database unavailable")
        original = (
            make_error()
            .add_error(inner)
            .add_source("svc.py")
            .add_function("handler")
            .add_line_number("7")
            .with_stack()
        )

        restored = RichError.from_dict(original.to_dict())

        assert restored.code == original.code
        assert restored.message == original.message
        assert restored.occurred_at == original.occurred_at
        assert restored.get_tags() == ("http",)
        assert restored.get_metadata_item("id") == ("42", True)
        assert restored.stack == original.stack
        # call site captured by with_stack survives the round trip
        assert restored.source == original.source
        assert restored.line == original.line
        # plain inner errors travel as strings and are dropped
        assert [e.code for e in restored.get_errors()] == ["DbDown"]

    def test_pickle_round_trip(self):
        err = make_error().add_source("svc.py")

        restored = pickle.loads(pickle.dumps(err))

        assert restored.code == err.code
        assert restored.occurred_at == err.occurred_at
        assert restored.get_metadata_item("id") == ("42", True)
        assert restored.source == "svc.py"

    def test_copy_is_independent_value(self):
        err = make_error()

        duplicate = copy.copy(err)

        assert duplicate is not err
        assert duplicate.to_dict() == err.to_dict()
