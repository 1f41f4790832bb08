"""Tests for spinefp.core.maybe module."""

import pytest

from spinefp.core.errors import MissingCaseHandlerError
from spinefp.core.maybe import Absent, Maybe, Present, to_optional
from spinefp.core.result import Success


class TestToOptional:
    """Test the smart constructor."""

    @pytest.mark.parametrize("value", [1, "abc", 0, "", False, [], {}, {"name": "jason"}, Present(1)])
    def test_non_none_is_present(self, value):
        """Every non-None value is wrapped unchanged."""
        seen = to_optional(value).cata(Present=lambda x: x, Absent=lambda: pytest.fail("Absent"))
        assert seen is value

    def test_none_is_absent(self):
        assert to_optional(None) == Absent()
        assert to_optional(None).is_absent()


class TestPresent:
    """Test Present variant."""

    def test_create_present(self):
        m = Present(42)
        assert m.value == 42
        assert m.is_present() is True
        assert m.is_absent() is False

    def test_present_none_is_allowed(self):
        """The payload is never re-validated."""
        assert Present(None).is_present()

    def test_map(self):
        assert Present(5).map(lambda x: x * 2) == Present(10)

    def test_map_result_is_not_validated(self):
        """map keeps a None result as the payload."""
        assert Present(5).map(lambda x: None) == Present(None)

    def test_map_chaining(self):
        assert Present(3).map(lambda x: x * 2).map(lambda x: x + 1) == Present(7)

    def test_chain_flattens(self):
        def half(x: int) -> Maybe[int]:
            return Present(x // 2) if x % 2 == 0 else Absent()

        assert Present(4).chain(half) == Present(2)
        assert Present(3).chain(half) == Absent()

    def test_ap_applies_held_function(self):
        """Present(fn).ap(other) is other.map(fn)."""
        assert Present(lambda x: x + 1).ap(Present(1)) == Present(2)
        assert Present(str.upper).ap(Absent()) == Absent()

    def test_default_keeps_present(self, callback):
        m = Present("kept")
        assert m.default(callback) is m
        assert callback.count == 0

    def test_describe(self):
        assert Present(1).describe() == "Present(1)"
        assert Present("abc").describe() == "Present(abc)"
        assert str(Present(1)) == "Present(1)"

    def test_repr(self):
        assert repr(Present("abc")) == "Present('abc')"

    def test_transformer_errors_propagate(self):
        """Errors raised by the caller's function are not caught."""
        with pytest.raises(ZeroDivisionError):
            Present(1).map(lambda x: x / 0)

    def test_present_is_immutable(self):
        m = Present(42)
        with pytest.raises(Exception):  # FrozenInstanceError or AttributeError
            m.value = 99


class TestAbsent:
    """Test Absent variant."""

    def test_predicates(self):
        assert Absent().is_absent() is True
        assert Absent().is_present() is False

    def test_structural_equality(self):
        """All Absent values are the same case."""
        assert Absent() == Absent()
        assert hash(Absent()) == hash(Absent())

    def test_map_never_calls(self, callback):
        assert Absent().map(callback) == Absent()
        assert callback.count == 0

    def test_chain_never_calls(self, callback):
        assert Absent().chain(callback) == Absent()
        assert callback.count == 0

    def test_ap_never_touches_argument(self):
        """Absence takes precedence over application."""

        class Exploding:
            def map(self, f):
                pytest.fail("argument was touched")

        assert Absent().ap(Exploding()) == Absent()

    def test_default_calls_thunk_once(self, callback_factory):
        thunk = callback_factory(returns=7)
        assert Absent().default(thunk) == Present(7)
        assert thunk.count == 1

    def test_default_rewraps_none(self, callback):
        """A thunk returning None gives Absent again."""
        assert Absent().default(callback) == Absent()
        assert callback.count == 1

    def test_describe(self):
        assert Absent().describe() == "Absent"
        assert repr(Absent()) == "Absent()"


class TestCata:
    """Test exhaustive case analysis."""

    def test_present_handler(self):
        assert Present(2).cata(Present=lambda x: x * 10, Absent=lambda: 0) == 20

    def test_absent_handler(self, callback_factory):
        on_absent = callback_factory(returns="none")
        assert Absent().cata(Present=lambda x: x, Absent=on_absent) == "none"
        assert on_absent.calls == [()]

    def test_mapping_form(self):
        handlers = {"Present": lambda x: f"got {x}", "Absent": lambda: "nothing"}
        assert Present(1).cata(handlers) == "got 1"
        assert Absent().cata(handlers) == "nothing"

    @pytest.mark.parametrize("container", [Present(1), Absent()])
    def test_empty_handlers_raise(self, container):
        with pytest.raises(MissingCaseHandlerError):
            container.cata({})

    @pytest.mark.parametrize("container", [Present(1), Absent()])
    def test_one_missing_handler_raises(self, container, callback):
        with pytest.raises(MissingCaseHandlerError) as exc_info:
            container.cata(Present=callback)
        assert exc_info.value.missing == ("Absent",)
        assert exc_info.value.family == "Maybe"
        assert callback.count == 0

    def test_non_callable_handler_raises(self):
        with pytest.raises(MissingCaseHandlerError) as exc_info:
            Present(1).cata(Present="yes", Absent=lambda: None)
        assert exc_info.value.missing == ("Present",)


class TestFamily:
    """Test the closed-family rules."""

    def test_base_not_instantiable(self):
        with pytest.raises(TypeError):
            Maybe()

    def test_cannot_subclass(self):
        with pytest.raises(TypeError):

            class Other(Maybe):
                pass

    def test_not_equal_to_result(self):
        assert Present(1) != Success(1)

    def test_pattern_matching(self):
        match Present(42):
            case Present(value):
                assert value == 42
            case Absent():
                pytest.fail("Should not match Absent")
