"""Tests for the Result sum type.

Validates:
- Functor and monad laws
- Propagation: every combinator leaves an Err untouched
- Width-merging chain keeps every error cause distinguishable
- Immutability and the explicit unwrap boundary
"""

from __future__ import annotations

import pickle
from dataclasses import dataclass
from typing import Callable

import pytest

from railcase import UnwrapError, flow
from railcase.core.result import (
    Err,
    Ok,
    Result,
    collect_results,
    from_predicate,
    is_err,
    is_ok,
    sequence,
    traverse,
    try_catch_sync,
)


def parse_int(s: str) -> Result[int, str]:
    try:
        return Ok(int(s))
    except ValueError:
        return Err(f"invalid: {s}")


def validate_positive(n: int) -> Result[int, str]:
    return Ok(n) if n > 0 else Err("must be positive")


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("result", [Ok(42), Err("fail")])
def test_functor_identity(result: Result[int, str]) -> None:
    """Functor law: fmap id = id"""
    assert result.map(lambda x: x) == result


@pytest.mark.parametrize("result", [Ok(5), Err("fail")])
def test_functor_composition(result: Result[int, str]) -> None:
    """Functor law: fmap (g . f) = fmap g . fmap f"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], str] = lambda x: f"<{x}>"

    assert result.map(f).map(g) == result.map(flow(f, g))


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(42).chain(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = Ok(42)
    assert m.chain(Ok) == m


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = Ok(5)
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2) if x < 100 else Err("big")

    assert m.chain(f).chain(g) == m.chain(lambda x: f(x).chain(g))


# ═════════════════════════════════════════════════════════════════════════════
# Propagation
# ═════════════════════════════════════════════════════════════════════════════


def test_err_passes_through_every_success_transform() -> None:
    """No success-side transform escapes the failure branch."""
    calls: list[str] = []

    def spy(name: str) -> Callable[[object], Result[object, str]]:
        def fn(x: object) -> Result[object, str]:
            calls.append(name)
            return Ok(x)
        return fn

    failed: Result[int, str] = Err("boom")

    assert failed.map(lambda x: calls.append("map")) == Err("boom")
    assert failed.chain(spy("chain")) == Err("boom")
    assert failed.chain_w(spy("chain_w")) == Err("boom")
    assert failed.inspect(lambda x: calls.append("inspect")) == Err("boom")
    assert calls == []


def test_err_is_returned_unchanged() -> None:
    """Same instance comes back, payload untouched."""
    payload = {"reason": "boom"}
    failed: Result[int, dict[str, str]] = Err(payload)

    assert failed.map(lambda x: x + 1) is failed
    assert failed.chain(lambda x: Ok(x)) is failed
    assert failed.unwrap_err() is payload


def test_map_error_on_ok_passes_through() -> None:
    ok: Result[int, str] = Ok(42)
    assert ok.map_error(lambda e: f"Error: {e}") == Ok(42)
    assert ok.map_left(lambda e: f"Error: {e}") == Ok(42)


def test_map_error_on_err() -> None:
    failed: Result[int, str] = Err("fail")
    assert failed.map_error(lambda e: f"Error: {e}") == Err("Error: fail")


# ═════════════════════════════════════════════════════════════════════════════
# Width-merging chain
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ParseError:
    text: str


@dataclass(frozen=True)
class RangeError:
    value: int


def parse(text: str) -> Result[int, ParseError]:
    return Ok(int(text)) if text.lstrip("-").isdigit() else Err(ParseError(text))


def in_range(n: int) -> Result[int, RangeError]:
    return Ok(n) if 0 <= n <= 10 else Err(RangeError(n))


def describe(result: Result[int, ParseError | RangeError]) -> str:
    def on_err(e: ParseError | RangeError) -> str:
        match e:
            case ParseError(text=text):
                return f"parse:{text}"
            case RangeError(value=value):
                return f"range:{value}"
    return result.match(on_err, lambda n: f"ok:{n}")


def test_chain_w_ok_to_err() -> None:
    result = Ok("50").chain_w(lambda s: Err(RangeError(int(s))))
    assert result == Err(RangeError(50))


@pytest.mark.parametrize(
    ("text", "expected"),
    [("7", "ok:7"), ("seven", "parse:seven"), ("70", "range:70")],
)
def test_chain_w_keeps_each_cause_reachable(text: str, expected: str) -> None:
    """Two steps with disjoint error types: each one reaches match intact."""
    result = Ok(text).chain(parse).chain_w(in_range)
    assert describe(result) == expected


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert is_ok(result) and not is_err(result)
    assert result.unwrap() == 42


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert is_err(result) and not is_ok(result)
    assert result.unwrap_err() == "failed"


def test_unwrap_on_wrong_variant_raises() -> None:
    with pytest.raises(UnwrapError) as exc_info:
        Err("fail").unwrap()
    assert exc_info.value.container == Err("fail")

    with pytest.raises(UnwrapError):
        Ok(1).unwrap_err()


def test_immutable() -> None:
    result = Ok(1)
    with pytest.raises(AttributeError):
        result._is_ok = False  # type: ignore[misc]
    with pytest.raises(AttributeError):
        result.extra = 1  # type: ignore[attr-defined]
    assert result == Ok(1)


def test_no_implicit_unwrap() -> None:
    """Neither truthiness nor iteration may quietly drop the error."""
    with pytest.raises(TypeError):
        list(Err("fail"))  # type: ignore[call-overload]
    assert not hasattr(Result, "__bool__")


def test_bimap() -> None:
    assert Ok(5).bimap(lambda x: x * 2, lambda e: f"Error: {e}") == Ok(10)
    assert Err("fail").bimap(lambda x: x * 2, lambda e: f"Error: {e}") == Err("Error: fail")


def test_flat_map_alias() -> None:
    result: Result[int, str] = Ok(5)
    assert result.flat_map(lambda x: Ok(x * 2)) == result.chain(lambda x: Ok(x * 2))


def test_or_else() -> None:
    assert Err("fail").or_else(lambda _: Ok(42)) == Ok(42)
    assert Ok(5).or_else(lambda _: Ok(42)) == Ok(5)


def test_get_or_else() -> None:
    assert Ok(5).get_or_else(lambda: 10) == 5
    assert Err("fail").get_or_else(lambda: 10) == 10


def test_unwrap_or_variants() -> None:
    assert Ok(5).unwrap_or(10) == 5
    assert Err("fail").unwrap_or(10) == 10
    assert Err("fail").unwrap_or_else(len) == 4


def test_match() -> None:
    on_err = lambda e: f"failed: {e}"  # noqa: E731
    on_ok = lambda x: f"success: {x}"  # noqa: E731

    assert Ok(42).match(on_err, on_ok) == "success: 42"
    assert Err("fail").match(on_err, on_ok) == "failed: fail"
    assert Err("fail").match(on_err=on_err, on_ok=on_ok) == "failed: fail"


def test_match_calls_exactly_one_handler() -> None:
    calls: list[str] = []
    Ok(1).match(lambda e: calls.append("err"), lambda v: calls.append("ok"))
    Err(1).match(lambda e: calls.append("err"), lambda v: calls.append("ok"))
    assert calls == ["ok", "err"]


def test_match_w_mixed_return_types() -> None:
    assert Ok(3).match_w(lambda e: None, lambda v: v * 2) == 6
    assert Err("x").match_w(lambda e: None, lambda v: v * 2) is None


def test_inspect() -> None:
    seen: list[object] = []
    result: Result[int, str] = Ok(42)

    assert result.inspect(seen.append) is result
    assert Err("fail").inspect_err(seen.append) == Err("fail")
    assert seen == [42, "fail"]


def test_flatten() -> None:
    assert Ok(Ok(42)).flatten() == Ok(42)
    assert Ok(Err("fail")).flatten() == Err("fail")
    assert Err("outer").flatten() == Err("outer")


def test_equality_and_hash() -> None:
    assert Ok(42) == Ok(42)
    assert Err("fail") == Err("fail")
    assert Ok(42) != Ok(43)
    assert Ok(42) != Err(42)
    assert len({Ok(1), Ok(1), Err(1)}) == 2


def test_repr() -> None:
    assert repr(Ok(1)) == "Ok(1)"
    assert str(Err("x")) == "Err('x')"


def test_pickle_roundtrip() -> None:
    assert pickle.loads(pickle.dumps(Err({"code": 1}))) == Err({"code": 1})


def test_from_predicate() -> None:
    positive = from_predicate(lambda n: n > 0, lambda: "not positive")

    assert positive(3) == Ok(3)
    assert positive(-1) == Err("not positive")


def test_try_catch_sync() -> None:
    assert try_catch_sync(lambda: int("12"), lambda e: type(e).__name__) == Ok(12)
    assert try_catch_sync(lambda: int("x"), lambda e: type(e).__name__) == Err("ValueError")


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_sequence() -> None:
    assert sequence([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
    assert sequence([Ok(1), Err("fail"), Err("later")]) == Err("fail")
    assert sequence([]) == Ok([])


def test_traverse_stops_at_first_err() -> None:
    seen: list[str] = []

    def tracked(s: str) -> Result[int, str]:
        seen.append(s)
        return parse_int(s)

    assert traverse(["1", "2", "3"], parse_int) == Ok([1, 2, 3])
    assert traverse(["1", "bad", "3"], tracked) == Err("invalid: bad")
    assert seen == ["1", "bad"]


def test_collect_results() -> None:
    assert collect_results([Ok(1), Ok(2)]) == Ok([1, 2])
    assert collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")]) == Err(["e1", "e2"])


# ═════════════════════════════════════════════════════════════════════════════
# Railway-Oriented Programming Patterns
# ═════════════════════════════════════════════════════════════════════════════


def test_railway_success_path() -> None:
    result = Ok("42").chain(parse_int).chain(validate_positive).map(lambda n: n * 2)
    assert result == Ok(84)


def test_railway_error_path() -> None:
    assert Ok("bad").chain(parse_int).chain(validate_positive) == Err("invalid: bad")
    assert Ok("-5").chain(parse_int).chain(validate_positive) == Err("must be positive")


def test_three_step_chain_stops_at_second() -> None:
    """Step 2 fails: step 3 never runs, match sees exactly the step 2 error."""
    step3_calls: list[int] = []

    def step1(n: int) -> Result[int, str]:
        return Ok(n + 1)

    def step2(n: int) -> Result[int, str]:
        return Err("too small") if n < 10 else Ok(n)

    def step3(n: int) -> Result[int, str]:
        step3_calls.append(n)
        return Ok(n * 2)

    result = Ok(1).chain(step1).chain(step2).chain(step3)
    received: list[str] = []

    result.match(received.append, lambda v: pytest.fail("unexpected success"))
    assert result == Err("too small")
    assert received == ["too small"]
    assert step3_calls == []


def test_fallback_chain() -> None:
    result = (
        Err("primary unavailable")
        .or_else(lambda _: Err("backup unavailable"))
        .or_else(lambda _: Ok("cached data"))
    )
    assert result == Ok("cached data")
