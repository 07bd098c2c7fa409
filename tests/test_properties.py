"""
Property-based tests for the mock runtime.

These tests use hypothesis to check ledger alignment and behavior
resolution against a simple model for arbitrary call/config sequences.
"""

from collections import deque

from hypothesis import given
from hypothesis import strategies as st

from mockfn import MockRegistry, ResultType, fn

values = st.one_of(st.none(), st.integers(), st.text(max_size=5))

operations = st.lists(
    st.one_of(
        st.tuples(st.just("once"), values),
        st.tuples(st.just("persistent"), values),
        st.tuples(st.just("call"), values),
        st.tuples(st.just("clear"), st.none()),
        st.tuples(st.just("reset"), st.none()),
    ),
    max_size=40,
)


class TestLedgerProperties:
    @given(args=st.lists(st.tuples(values, values), max_size=30))
    def test_ledger_sequences_stay_aligned(self, args):
        """
        For any N invocations, calls/results/contexts all have length N and
        last_call is the final call.
        """
        mock = fn(registry=MockRegistry())
        for a, b in args:
            mock(a, b)

        assert len(mock.calls) == len(mock.results) == len(mock.contexts) == len(args)
        assert len(mock.instances) <= len(mock.calls)
        if args:
            assert mock.last_call == mock.calls[-1] == (args[-1], {})
        else:
            assert mock.last_call is None
        assert all(r.type is ResultType.RETURN for r in mock.results)

    @given(receivers=st.lists(st.integers(), min_size=1, max_size=10, unique=True))
    def test_contexts_follow_receivers(self, receivers):
        mock = fn(registry=MockRegistry())
        boxed = [object() for _ in receivers]
        for receiver, arg in zip(boxed, receivers):
            mock.call_with(receiver, arg)
        assert mock.contexts == boxed

    @given(once=st.lists(values, max_size=10), extra_calls=st.integers(min_value=0, max_value=3))
    def test_once_values_consumed_in_order(self, once, extra_calls):
        mock = fn(registry=MockRegistry())
        for value in once:
            mock.mock_return_value_once(value)

        outputs = [mock() for _ in range(len(once) + extra_calls)]

        assert outputs == once + [None] * extra_calls


class TestResolutionModel:
    @given(ops=operations)
    def test_matches_queue_and_slot_model(self, ops):
        """
        Returns match a model with one FIFO of one-shot values and one
        persistent slot, under interleaved clear/reset.
        """
        mock = fn(registry=MockRegistry())
        queue: deque = deque()
        persistent = None
        has_persistent = False
        expected_calls = 0

        for op, value in ops:
            if op == "once":
                mock.mock_return_value_once(value)
                queue.append(value)
            elif op == "persistent":
                mock.mock_return_value(value)
                persistent, has_persistent = value, True
            elif op == "clear":
                mock.mock_clear()
                expected_calls = 0
            elif op == "reset":
                mock.mock_reset()
                queue.clear()
                persistent, has_persistent = None, False
                expected_calls = 0
            else:
                if queue:
                    expected = queue.popleft()
                elif has_persistent:
                    expected = persistent
                else:
                    expected = None
                assert mock(value) == expected
                expected_calls += 1

            assert len(mock.calls) == expected_calls
