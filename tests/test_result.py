"""Tests for Result type (Success and Failure)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eaux import (
    ContractViolationError,
    ExpectationError,
    Failure,
    ImproperUnwrapError,
    Nothing,
    Something,
    Success,
    failure,
    is_outcome,
    is_result,
    nothing,
    something,
    success,
)
from tests.strategies import errors, int_functions, values


class TestSuccessCreation:
    """Tests for success() and Success instances."""

    def test_success_creation(self):
        result = success(42)
        assert isinstance(result, Success)
        assert result.value == 42

    def test_success_with_none(self):
        """Success places no constraint on its value."""
        result = success(None)
        assert result.is_success() is True
        assert result.unwrap() is None

    def test_success_is_frozen(self):
        result = success(42)
        with pytest.raises(AttributeError):
            result.value = 100  # type: ignore[misc]


class TestFailureCreation:
    """Tests for failure() and the non-None error contract."""

    def test_failure_creation(self):
        exc = ValueError("something went wrong")
        result = failure(exc)
        assert isinstance(result, Failure)
        assert result.error is exc

    def test_failure_with_plain_values(self):
        assert failure("bad").error == "bad"
        assert failure(0).error == 0
        assert failure("").error == ""

    def test_failure_rejects_none(self):
        with pytest.raises(ContractViolationError, match="must not be None"):
            failure(None)

    def test_failure_class_rejects_none(self):
        """The check lives on the type, so direct construction is covered too."""
        with pytest.raises(ContractViolationError):
            Failure(None)

    def test_failure_is_frozen(self):
        result = failure("error")
        with pytest.raises(AttributeError):
            result.error = "new error"  # type: ignore[misc]


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_success_equality(self):
        assert success(42) == success(42)
        assert success(42) != success(43)

    def test_failure_equality(self):
        assert failure("error") == failure("error")
        assert failure("error1") != failure("error2")

    def test_success_not_equal_to_failure(self):
        assert success(42) != failure(42)

    def test_hashable(self):
        assert hash(success(42)) == hash(success(42))
        assert {failure("error"): "value"}[failure("error")] == "value"


class TestIsResult:
    """Tests for the is_result()/is_outcome() type guard."""

    @pytest.mark.parametrize("value", [None, 42, ValueError("x"), something(1), nothing()])
    def test_non_result_values(self, value):
        assert is_result(value) is False

    def test_result_values(self):
        assert is_result(success(42)) is True
        assert is_result(failure(ValueError("Test error"))) is True

    def test_is_outcome_alias(self):
        assert is_outcome is is_result


class TestResultQuerying:
    """Tests for is_success/is_failure and their predicate forms."""

    def test_success_flags(self):
        assert success(42).is_success() is True
        assert success(42).is_failure() is False

    def test_failure_flags(self):
        assert failure("e").is_success() is False
        assert failure("e").is_failure() is True

    def test_success_is_success_and(self):
        assert success(42).is_success_and(lambda x: x == 42) is True
        assert success(42).is_success_and(lambda x: x == 0) is False

    def test_failure_is_success_and_skips_predicate(self, call_log):
        assert failure("e").is_success_and(call_log) is False
        assert call_log.calls == []

    def test_failure_is_failure_and(self):
        assert failure("e").is_failure_and(lambda e: e == "e") is True
        assert failure("e").is_failure_and(lambda e: e == "x") is False

    def test_success_is_failure_and_skips_predicate(self, call_log):
        assert success(42).is_failure_and(call_log) is False
        assert call_log.calls == []


class TestResultUnwrap:
    """Tests for unwrap, unwrap_failure, expect, expect_failure."""

    def test_success_unwrap(self):
        assert success(42).unwrap() == 42

    def test_failure_unwrap_raises(self):
        with pytest.raises(ImproperUnwrapError, match="Attempted to unwrap a `Failure` value"):
            failure("error").unwrap()

    def test_failure_unwrap_failure(self):
        assert failure("error").unwrap_failure() == "error"

    def test_success_unwrap_failure_raises(self):
        with pytest.raises(ImproperUnwrapError, match="Attempted to unwrap a `Success` value"):
            success(42).unwrap_failure()

    def test_success_expect(self):
        assert success(42).expect("should not fail") == 42

    def test_failure_expect_carries_message_verbatim(self):
        with pytest.raises(ExpectationError) as exc_info:
            failure("error").expect("the port must parse")
        assert str(exc_info.value) == "the port must parse"

    def test_failure_expect_failure(self):
        assert failure("error").expect_failure("should not fail") == "error"

    def test_success_expect_failure_raises(self):
        with pytest.raises(ExpectationError) as exc_info:
            success(42).expect_failure("expected a parse error")
        assert exc_info.value.message == "expected a parse error"


class TestResultMap:
    """Tests for map and map_failure."""

    def test_success_map(self):
        assert success(5).map(lambda x: x * 2) == success(10)

    def test_failure_map_skips_f(self, call_log):
        result = failure("error")
        assert result.map(call_log) is result
        assert call_log.calls == []

    def test_failure_map_failure(self):
        error = ValueError("Test error")
        result = failure(error).map_failure(lambda e: ValueError(f"{e} (mapped)"))
        assert isinstance(result, Failure)
        assert str(result.unwrap_failure()) == "Test error (mapped)"

    def test_success_map_failure_skips_f(self, call_log):
        result = success(42)
        assert result.map_failure(call_log) is result
        assert call_log.calls == []

    def test_map_failure_rejects_none(self):
        with pytest.raises(ContractViolationError, match="must not be None"):
            failure("error").map_failure(lambda _: None)


class TestResultAndThen:
    """Tests for and_then (flatmap/bind)."""

    def test_success_and_then_success(self):
        assert success(42).and_then(lambda x: success(x * 2)) == success(84)

    def test_success_and_then_failure(self):
        assert success(42).and_then(lambda _: failure("no")) == failure("no")

    def test_failure_and_then_skips_f(self, call_log):
        result = failure("error")
        assert result.and_then(call_log) is result
        assert call_log.calls == []

    def test_and_then_must_return_result(self):
        with pytest.raises(ContractViolationError, match="must return a Result"):
            success(42).and_then(lambda x: something(x))


class TestResultInspect:
    """Tests for inspect and inspect_failure."""

    def test_success_inspect(self, call_log):
        result = success(42)
        assert result.inspect(call_log) is result
        assert call_log.calls == [42]

    def test_failure_inspect_skips_f(self, call_log):
        result = failure("error")
        assert result.inspect(call_log) is result
        assert call_log.calls == []

    def test_failure_inspect_failure(self, call_log):
        result = failure("error")
        assert result.inspect_failure(call_log) is result
        assert call_log.calls == ["error"]

    def test_success_inspect_failure_skips_f(self, call_log):
        result = success(42)
        assert result.inspect_failure(call_log) is result
        assert call_log.calls == []


class TestResultCombining:
    """Tests for and_ and or_."""

    def test_success_and(self):
        other = success("bar")
        assert success("foo").and_(other) is other

    def test_failure_and(self):
        result = failure("error")
        assert result.and_(success(42)) is result

    def test_success_or(self):
        result = success(42)
        assert result.or_(failure("other")) is result

    def test_failure_or(self):
        other = success(42)
        assert failure("error").or_(other) is other

    @pytest.mark.parametrize("method", ["and_", "or_"])
    @pytest.mark.parametrize("result", [success(1), failure("e")])
    def test_combining_requires_result(self, result, method):
        with pytest.raises(ContractViolationError, match="must be a Result"):
            getattr(result, method)(something(1))


class TestResultConversion:
    """Tests for get_success() and get_failure()."""

    def test_success_get_success(self):
        assert success(42).get_success() == something(42)

    def test_success_get_failure(self):
        assert success(42).get_failure() is Nothing

    def test_failure_get_success(self):
        assert failure("error").get_success() is Nothing

    def test_failure_get_failure(self):
        maybe = failure("error").get_failure()
        assert isinstance(maybe, Something)
        assert maybe.unwrap() == "error"


class TestResultArgumentContracts:
    """Callbacks and messages are validated before use."""

    @pytest.mark.parametrize("result", [success(1), failure("e")])
    @pytest.mark.parametrize(
        "method",
        [
            "and_then",
            "inspect",
            "inspect_failure",
            "is_failure_and",
            "is_success_and",
            "map",
            "map_failure",
        ],
    )
    def test_callback_must_be_callable(self, result, method):
        with pytest.raises(ContractViolationError, match="must be callable"):
            getattr(result, method)("not callable")

    @pytest.mark.parametrize("result", [success(1), failure("e")])
    @pytest.mark.parametrize("method", ["expect", "expect_failure"])
    def test_message_must_be_str(self, result, method):
        with pytest.raises(ContractViolationError, match="must be a str"):
            getattr(result, method)(None)

    def test_success_predicate_must_return_bool(self):
        with pytest.raises(ContractViolationError, match="must return a bool"):
            success(1).is_success_and(lambda x: x)

    def test_failure_predicate_must_return_bool(self):
        with pytest.raises(ContractViolationError, match="must return a bool"):
            failure("e").is_failure_and(lambda e: e)


class TestResultPatternMatching:
    """Variants work with structural pattern matching."""

    def test_match_variants(self):
        def describe(result):
            match result:
                case Success(value=v):
                    return f"ok:{v}"
                case Failure(error=e):
                    return f"err:{e}"

        assert describe(success(1)) == "ok:1"
        assert describe(failure("x")) == "err:x"


class TestResultProperties:
    """Property-based tests for Result."""

    @given(values)
    def test_success_projections(self, value):
        result = success(value)
        assert result.get_success().unwrap() == value
        assert result.get_failure().is_nothing() is True

    @given(errors)
    def test_failure_projections(self, error):
        result = failure(error)
        assert result.get_failure().unwrap() == error
        assert result.get_success().is_nothing() is True

    @given(st.integers(), int_functions, int_functions)
    def test_map_composes(self, value, f, g):
        assert success(value).map(f).map(g) == success(value).map(lambda x: g(f(x)))

    @given(errors, values)
    def test_failure_and_absorbs(self, error, value):
        assert failure(error).and_(success(value)) == failure(error)

    @given(values, errors)
    def test_success_or_absorbs(self, value, error):
        assert success(value).or_(failure(error)) == success(value)
