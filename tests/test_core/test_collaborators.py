"""Tests for the in-process collaborator implementations."""

import pytest

from product_registry.core.collaborators import (
    AuthorityVerifier,
    BlockClock,
    Clock,
    FeeSettlement,
    FeeTransfer,
    RecordingSettlement,
    Resettable,
    StaticAuthorityVerifier,
    WallClock,
)


class TestClocks:
    """Tests for BlockClock and WallClock."""

    def test_block_clock_starts_at_height(self):
        assert BlockClock(7).now() == 7

    def test_block_clock_advances(self):
        clock = BlockClock()
        assert clock.advance(3) == 3
        assert clock.advance() == 4
        assert clock.now() == 4

    def test_block_clock_never_moves_backwards(self):
        clock = BlockClock(10)
        with pytest.raises(ValueError, match="backwards"):
            clock.advance(-1)
        assert clock.now() == 10

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            BlockClock(-1)

    def test_wall_clock_is_non_decreasing(self):
        clock = WallClock()
        first = clock.now()
        assert clock.now() >= first > 0

    def test_clocks_satisfy_protocol(self):
        assert isinstance(BlockClock(), Clock)
        assert isinstance(WallClock(), Clock)


class TestStaticAuthorityVerifier:
    """Tests for StaticAuthorityVerifier."""

    def test_membership(self):
        verifier = StaticAuthorityVerifier({"ST1TEST"})
        assert verifier.is_verified("ST1TEST")
        assert not verifier.is_verified("ST3FAKE")

    def test_add_and_remove(self):
        verifier = StaticAuthorityVerifier()
        verifier.add("ST3FAKE")
        assert verifier.is_verified("ST3FAKE")
        verifier.remove("ST3FAKE")
        assert not verifier.is_verified("ST3FAKE")

    def test_remove_unknown_is_noop(self):
        verifier = StaticAuthorityVerifier()
        verifier.remove("nobody")
        assert not verifier.is_verified("nobody")

    def test_satisfies_protocol(self):
        assert isinstance(StaticAuthorityVerifier(), AuthorityVerifier)


class TestRecordingSettlement:
    """Tests for RecordingSettlement."""

    def test_records_transfers(self):
        settlement = RecordingSettlement()
        assert settlement.transfer(500, "ST1TEST", "ST2TEST")
        assert settlement.transfers == [FeeTransfer(amount=500, sender="ST1TEST", recipient="ST2TEST")]

    def test_failing_settlement_records_nothing(self):
        settlement = RecordingSettlement(fail=True)
        assert not settlement.transfer(500, "ST1TEST", "ST2TEST")
        assert settlement.transfers == []

    def test_satisfies_protocol(self):
        assert isinstance(RecordingSettlement(), FeeSettlement)


class TestCollaboratorReset:
    """Tests for returning collaborators to their initial state."""

    def test_block_clock_rewinds_to_start(self):
        clock = BlockClock(5)
        clock.advance(10)
        clock.reset()
        assert clock.now() == 5

    def test_verifier_restores_initial_identities(self):
        verifier = StaticAuthorityVerifier({"ST1TEST"})
        verifier.add("ST3FAKE")
        verifier.remove("ST1TEST")

        verifier.reset()

        assert verifier.is_verified("ST1TEST")
        assert not verifier.is_verified("ST3FAKE")

    def test_settlement_forgets_transfers(self):
        settlement = RecordingSettlement()
        settlement.transfer(500, "ST1TEST", "ST2TEST")
        settlement.fail = True

        settlement.reset()

        assert settlement.transfers == []
        assert not settlement.fail

    def test_settlement_keeps_constructor_failure_mode(self):
        settlement = RecordingSettlement(fail=True)
        settlement.reset()
        assert settlement.fail

    def test_wall_clock_is_not_resettable(self):
        assert isinstance(BlockClock(), Resettable)
        assert isinstance(StaticAuthorityVerifier(), Resettable)
        assert isinstance(RecordingSettlement(), Resettable)
        assert not isinstance(WallClock(), Resettable)
