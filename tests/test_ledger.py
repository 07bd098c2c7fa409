"""Tests for the per-mock invocation ledger."""

from mockfn.mock.ledger import INCOMPLETE, Call, MockResult, MockState, ResultType


class TestMockState:
    def test_reserve_appends_pending_slot(self):
        state = MockState()
        handle = state.reserve(Call((1, 2), {}), None)

        assert handle == 0
        assert state.calls == [((1, 2), {})]
        assert state.contexts == [None]
        assert state.results == [INCOMPLETE]
        assert state.results[0].is_incomplete

    def test_finalize_overwrites_in_place(self):
        state = MockState()
        first = state.reserve(Call(("a",), {}), None)
        second = state.reserve(Call(("b",), {}), None)

        # Out of order on purpose: each slot is addressed by its handle.
        state.finalize(second, MockResult.returned("B"))
        assert state.results == [INCOMPLETE, MockResult.returned("B")]
        state.finalize(first, MockResult.returned("A"))

        assert state.results == [MockResult.returned("A"), MockResult.returned("B")]
        assert len(state.calls) == len(state.results) == len(state.contexts) == 2

    def test_thrown_result(self):
        error = RuntimeError("x")
        result = MockResult.thrown(error)
        assert result.type is ResultType.THROW
        assert result.value is error
        assert not result.is_incomplete

    def test_last_call(self):
        state = MockState()
        assert state.last_call is None
        state.reserve(Call((1,), {}), None)
        state.reserve(Call((2,), {"k": "v"}), None)
        assert state.last_call == Call((2,), {"k": "v"})
        assert state.last_call.kwargs == {"k": "v"}

    def test_instances_are_not_index_aligned(self):
        state = MockState()
        state.reserve(Call((), {}), None)
        state.reserve(Call((), {}), None)
        state.record_constructed("instance")

        assert len(state.calls) == 2
        assert state.instances == ["instance"]

    def test_invocation_call_order_is_shared_between_ledgers(self):
        a = MockState()
        b = MockState()
        a.reserve(Call((), {}), None)
        b.reserve(Call((), {}), None)
        a.reserve(Call((), {}), None)

        assert a.invocation_call_order[0] < b.invocation_call_order[0] < a.invocation_call_order[1]

    def test_len_counts_calls(self):
        state = MockState()
        assert len(state) == 0
        state.reserve(Call((), {}), "receiver")
        assert len(state) == 1
        assert state.contexts == ["receiver"]
