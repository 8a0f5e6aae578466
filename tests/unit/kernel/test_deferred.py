"""Unit tests for Deferred — lazy evaluation and exactly-once memoisation."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from optionkit import NOTHING, Deferred, Option, Some, deferred
from optionkit.kernel.errors import (
    NoValuePresentError,
    RecursiveResolutionError,
    ValidationError,
)
from optionkit.testing import CountingProducer


# ---------------------------------------------------------------------------
# Laziness
# ---------------------------------------------------------------------------


class TestLaziness:
    def test_construction_does_not_call_producer(self) -> None:
        producer = CountingProducer(1)
        Deferred(producer)
        assert producer.calls == 0

    def test_repr_does_not_resolve(self) -> None:
        producer = CountingProducer(1)
        opt = Deferred(producer)
        assert repr(opt) == "Deferred(<pending>)"
        assert producer.calls == 0

    def test_repr_after_resolution_matches_resolved(self) -> None:
        opt = Deferred(lambda: 5)
        opt.is_defined()
        assert repr(opt) == "Some(5)"

    def test_rejects_non_callable(self) -> None:
        with pytest.raises(ValidationError):
            Deferred(42)  # type: ignore[arg-type]

    def test_is_an_option(self) -> None:
        assert isinstance(Deferred(lambda: 1), Option)


# ---------------------------------------------------------------------------
# Memoisation
# ---------------------------------------------------------------------------


class TestMemoisation:
    def test_three_operations_call_producer_once(self) -> None:
        producer = CountingProducer(21)
        opt = Deferred(producer)
        assert opt.map(lambda x: x * 2).get() == 42
        assert opt.is_defined()
        assert opt.get_or_else(0) == 21
        assert producer.calls == 1

    def test_absent_result_is_memoised(self) -> None:
        producer = CountingProducer(None)
        opt = Deferred(producer)
        assert opt.is_empty()
        assert opt.get_or_else("d") == "d"
        assert list(opt) == []
        assert producer.calls == 1

    def test_every_operation_triggers_resolution(self) -> None:
        ops = [
            lambda o: o.is_defined(),
            lambda o: o.is_empty(),
            lambda o: o.map(str),
            lambda o: o.flat_map(Some),
            lambda o: o.filter(bool),
            lambda o: o.or_else(NOTHING),
            lambda o: o.get(),
            lambda o: o.get_or_else(0),
            lambda o: o.get_or_call(int),
            lambda o: o.get_or_raise(RuntimeError),
            lambda o: o.exists(bool),
            lambda o: o.if_defined(lambda _: None),
            lambda o: list(o),
            lambda o: o == Some(1),
            lambda o: hash(o),
            lambda o: o.to_nullable(),
        ]
        for op in ops:
            producer = CountingProducer(1)
            opt = Deferred(producer)
            op(opt)
            op(opt)
            assert producer.calls == 1


# ---------------------------------------------------------------------------
# Classification of producer results
# ---------------------------------------------------------------------------


class TestClassification:
    def test_none_is_nothing(self) -> None:
        assert Deferred(lambda: None).or_else(NOTHING) is NOTHING

    def test_value_is_some(self) -> None:
        assert Deferred(lambda: "x").or_else(NOTHING) == Some("x")

    def test_falsy_value_is_some(self) -> None:
        assert Deferred(lambda: 0).is_defined()

    def test_option_result_is_adopted(self) -> None:
        inner = Some(3)
        assert Deferred(lambda: inner).filter(lambda _: True) is inner
        assert Deferred(lambda: NOTHING).is_empty()

    def test_nested_deferred_is_flattened(self) -> None:
        outer = Deferred(lambda: Deferred(lambda: 4))
        assert outer.filter(lambda _: True) == Some(4)
        assert type(outer.filter(lambda _: True)) is Some

    def test_scenario(self) -> None:
        assert Deferred(lambda: None).or_else(Some(7)).get() == 7


# ---------------------------------------------------------------------------
# Indistinguishable from the resolved form
# ---------------------------------------------------------------------------


class TestResolvedForm:
    def test_equality_with_plain_variants(self) -> None:
        assert Deferred(lambda: 1) == Some(1)
        assert Some(1) == Deferred(lambda: 1)
        assert Deferred(lambda: None) == NOTHING
        assert NOTHING == Deferred(lambda: None)
        assert Deferred(lambda: 1) != NOTHING

    def test_equality_between_deferreds(self) -> None:
        assert Deferred(lambda: 2) == Deferred(lambda: 2)
        assert Deferred(lambda: 2) != Deferred(lambda: 3)

    def test_hash_matches_resolved(self) -> None:
        assert hash(Deferred(lambda: "k")) == hash(Some("k"))
        assert hash(Deferred(lambda: None)) == hash(NOTHING)

    def test_get_on_absent_raises(self) -> None:
        with pytest.raises(NoValuePresentError):
            Deferred(lambda: None).get()

    def test_filter_returns_resolved_instance(self) -> None:
        opt = Deferred(lambda: 10)
        assert opt.filter(lambda x: x > 5) == Some(10)
        assert opt.filter(lambda x: x > 50) is NOTHING


# ---------------------------------------------------------------------------
# Producer failures
# ---------------------------------------------------------------------------


class TestProducerFailure:
    def test_failure_propagates_and_is_not_memoised(self) -> None:
        producer = CountingProducer(5, fail_times=1, error=ConnectionError)
        opt = Deferred(producer)
        with pytest.raises(ConnectionError):
            opt.is_defined()
        assert repr(opt) == "Deferred(<pending>)"
        assert opt.get() == 5
        assert opt.get() == 5
        assert producer.calls == 2

    def test_failure_is_not_treated_as_absence(self) -> None:
        opt = Deferred(CountingProducer(None, fail_times=1))
        with pytest.raises(RuntimeError):
            opt.get_or_else("fallback")

    def test_recursive_producer_is_detected(self) -> None:
        holder: list[Deferred[int]] = []

        def producer() -> int:
            return holder[0].get() + 1

        opt: Deferred[int] = Deferred(producer)
        holder.append(opt)
        with pytest.raises(RecursiveResolutionError) as exc_info:
            opt.get()
        assert "producer" in exc_info.value.producer_name

    def test_recovers_after_recursive_failure(self) -> None:
        state = {"recurse": True}
        holder: list[Deferred[str]] = []

        def producer() -> str:
            if state["recurse"]:
                return holder[0].get()
            return "ok"

        opt: Deferred[str] = Deferred(producer)
        holder.append(opt)
        with pytest.raises(RecursiveResolutionError):
            opt.get()
        state["recurse"] = False
        assert opt.get() == "ok"


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestConcurrency:
    def test_exactly_once_under_contention(self) -> None:
        producer = CountingProducer("v", delay=0.05)
        opt = Deferred(producer)
        barrier = threading.Barrier(16)

        def worker() -> str:
            barrier.wait()
            return opt.get()

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: worker(), range(16)))

        assert results == ["v"] * 16
        assert producer.calls == 1

    def test_all_threads_observe_same_resolved_instance(self) -> None:
        opt = Deferred(lambda: object())
        barrier = threading.Barrier(8)

        def worker() -> object:
            barrier.wait()
            return opt.get()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: worker(), range(8)))

        assert all(r is results[0] for r in results)

    def test_failed_attempt_lets_another_thread_succeed(self) -> None:
        producer = CountingProducer(1, fail_times=1, delay=0.01)
        opt = Deferred(producer)
        barrier = threading.Barrier(4)

        def worker() -> str:
            barrier.wait()
            try:
                return str(opt.get())
            except RuntimeError:
                return "failed"

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: worker(), range(4)))

        assert results.count("failed") == 1
        assert results.count("1") == 3
        assert producer.calls == 2


# ---------------------------------------------------------------------------
# deferred() helper
# ---------------------------------------------------------------------------


class TestDeferredDecorator:
    def test_decorator_builds_deferred(self) -> None:
        calls: list[int] = []

        @deferred
        def answer() -> int:
            calls.append(1)
            return 42

        assert isinstance(answer, Deferred)
        assert calls == []
        assert answer.get() == 42
        assert answer.get_or_else(0) == 42
        assert calls == [1]


# ---------------------------------------------------------------------------
# Configuration never leaks into the algebra
# ---------------------------------------------------------------------------


class TestInvalidEnvironment:
    @pytest.mark.parametrize(
        ("name", "value"),
        [("OPTIONKIT_TRACE_RESOLUTION", "maybe"), ("OPTIONKIT_LOG_LEVEL", "verbose")],
    )
    def test_bad_variable_does_not_break_operations(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        monkeypatch.setenv(name, value)
        assert Deferred(lambda: 1).get_or_else(0) == 1
        assert Deferred(lambda: None).get_or_call(lambda: 2) == 2
        assert Deferred(lambda: None).or_else(Some(7)).get() == 7
        assert Deferred(lambda: 3).is_defined()
