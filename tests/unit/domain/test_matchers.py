"""Unit tests for stunt.domain.matchers."""

import inspect

import pytest

from stunt.domain.matchers import (
    ANY_ARGS,
    Anything,
    Arg,
    Args,
    Eq,
    Satisfies,
    as_matcher,
)

# pylint: disable=magic-value-comparison


def signature_of(func) -> inspect.Signature:
    """Return the signature of a plain function used as a method stand-in."""
    return inspect.signature(func)


def sum_(a, b): ...  # pylint: disable=missing-function-docstring


def submit(*items, **options): ...  # pylint: disable=missing-function-docstring


def greet(name, greeting="Hello"): ...  # pylint: disable=missing-function-docstring


def bound(func, *args, **kwargs) -> dict:
    """Bind a call like the engine does, defaults applied."""
    ba = inspect.signature(func).bind(*args, **kwargs)
    ba.apply_defaults()
    return dict(ba.arguments)


# --- single-value matchers ---


class TestAnything:
    """Tests for the wildcard matcher."""

    @staticmethod
    @pytest.mark.parametrize("value", [None, 0, "x", object()])
    def test_matches_everything(value):
        """An unrestricted wildcard accepts any value."""
        assert Anything().matches(value)

    @staticmethod
    def test_type_restriction():
        """A typed wildcard only accepts instances of the type."""
        matcher = Arg.any(str)
        assert matcher.matches("wig")
        assert not matcher.matches(3)

    @staticmethod
    def test_describe():
        """Descriptions mention the type when there is one."""
        assert Arg.any().describe() == "<any>"
        assert Arg.any(int).describe() == "<any int>"


class TestEq:
    """Tests for the exact-value matcher."""

    @staticmethod
    def test_matches_equal_values():
        """Equality, not identity, decides."""
        assert Eq([1, 2]).matches([1, 2])
        assert not Eq("Ni").matches("Ni!")

    @staticmethod
    def test_describe_uses_repr():
        """The expected value is shown as its repr."""
        assert Arg.eq("wig").describe() == "'wig'"


class TestSatisfies:
    """Tests for the predicate matcher."""

    @staticmethod
    def test_matches_when_predicate_truthy():
        """The predicate result decides."""
        matcher = Arg.that(lambda a: a == "My dear old wig")
        assert matcher.matches("My dear old wig")
        assert not matcher.matches("My dear new wig")

    @staticmethod
    def test_describe_with_description():
        """An explicit description wins."""
        assert Arg.that(bool, "truthy").describe() == "<truthy>"

    @staticmethod
    def test_describe_with_function_name():
        """Without description the predicate name is used."""

        def is_even(n):
            return n % 2 == 0

        assert Satisfies(is_even).describe() == "<satisfies is_even>"


def test_as_matcher_wraps_plain_values():
    """Plain values become Eq matchers; matchers pass through."""
    any_matcher = Anything()
    assert as_matcher(3) == Eq(3)
    assert as_matcher(any_matcher) is any_matcher


# --- Args ---


class TestArgs:
    """Tests for per-call argument matching."""

    @staticmethod
    def test_positional_and_keyword_spellings_match_alike():
        """Args bind to the signature, so both call spellings match."""
        sig = signature_of(sum_)
        assert Args(1, 2).matches(sig, bound(sum_, a=1, b=2))
        assert Args(a=1, b=2).matches(sig, bound(sum_, 1, 2))

    @staticmethod
    def test_unmentioned_parameters_match_anything():
        """Parameters left out of Args are not constrained."""
        sig = signature_of(sum_)
        assert Args(1).matches(sig, bound(sum_, 1, 99))
        assert not Args(1).matches(sig, bound(sum_, 2, 99))

    @staticmethod
    def test_wildcard_matches_every_call():
        """ANY_ARGS constrains nothing."""
        assert ANY_ARGS.is_wildcard
        assert ANY_ARGS.matches(signature_of(sum_), bound(sum_, 5, 6))

    @staticmethod
    def test_defaults_are_matched():
        """Defaulted parameters are compared with their default value."""
        sig = signature_of(greet)
        assert Args("Arthur", "Hello").matches(sig, bound(greet, "Arthur"))
        assert not Args("Arthur", "Ni!").matches(sig, bound(greet, "Arthur"))

    @staticmethod
    def test_var_positional_matches_element_wise():
        """*args matchers compare element by element and by length."""
        sig = signature_of(submit)
        args = Args("a", Arg.any())
        assert args.matches(sig, bound(submit, "a", "b"))
        assert not args.matches(sig, bound(submit, "a"))
        assert not args.matches(sig, bound(submit, "x", "b"))

    @staticmethod
    def test_var_keyword_matches_named_entries():
        """**kwargs matchers require each named entry to be present and match."""
        sig = signature_of(submit)
        args = Args(dry_run=True)
        assert args.matches(sig, bound(submit, dry_run=True, verbose=False))
        assert not args.matches(sig, bound(submit, dry_run=False))
        assert not args.matches(sig, bound(submit))

    @staticmethod
    def test_bind_rejects_arguments_not_in_signature():
        """Matchers that cannot bind raise TypeError."""
        with pytest.raises(TypeError):
            Args(1, 2, 3).bind(signature_of(sum_))

    @staticmethod
    def test_equality():
        """Args compare by their matchers; keyword order does not matter."""
        assert Args(1, b=2, c=3) == Args(1, c=3, b=2)
        assert Args(1) == Args(Eq(1))
        assert Args(1) != Args(2)
        assert Args() == ANY_ARGS

    @staticmethod
    def test_describe_without_signature():
        """Without signature, matchers are listed as written."""
        assert Args(1, b="x").describe() == "1, b='x'"
        assert ANY_ARGS.describe() == "<any arguments>"

    @staticmethod
    def test_describe_with_signature():
        """With a signature, matchers are listed by parameter name."""
        assert Args(1, 2).describe(signature_of(sum_)) == "a=1, b=2"
        assert Args("a", flag=True).describe(signature_of(submit)) == "'a', flag=True"

    @staticmethod
    def test_repr():
        """The repr shows the matchers."""
        assert repr(Args("wig")) == "Args('wig')"
