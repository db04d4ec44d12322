"""Unit tests for coverage state transitions and single-cell picks."""

import random

from triads.constraints import GeneratorConstraints, build_eligible_triads, eligible_ids
from triads.coverage import CoverageState, build_coverage, pick_cell, refresh_coverage
from triads.triad_cell import LimbScope

HANDS = GeneratorConstraints(
    scope=LimbScope.HANDS_ONLY,
    include_doubles=True,
    require_kick=False,
    allow_kick_doubles=False,
)
FULL_KIT = GeneratorConstraints(
    scope=LimbScope.HANDS_AND_KICK,
    include_doubles=True,
    require_kick=False,
    allow_kick_doubles=True,
)


class TestRefreshCoverage:
    """Rebuild rules: signature change or drained cycle."""

    def test_fresh_state_is_built(self):
        state = refresh_coverage(CoverageState.empty(), HANDS)

        assert state.signature == HANDS.signature
        assert state.remaining == frozenset(eligible_ids(HANDS))
        assert not state.is_fresh

    def test_active_state_with_same_signature_is_kept(self):
        state = CoverageState(remaining=frozenset({"RLR"}), signature=HANDS.signature)
        assert refresh_coverage(state, HANDS) is state

    def test_exhausted_state_is_refilled(self):
        state = CoverageState(remaining=frozenset(), signature=HANDS.signature)
        assert len(refresh_coverage(state, HANDS).remaining) == 8

    def test_signature_change_discards_history(self):
        state = CoverageState(remaining=frozenset({"RLR"}), signature=HANDS.signature)
        rebuilt = refresh_coverage(state, FULL_KIT)

        assert rebuilt.signature == FULL_KIT.signature
        assert len(rebuilt.remaining) == 27

    def test_empty_eligibility_builds_empty_state(self):
        contradictory = GeneratorConstraints(
            scope=LimbScope.HANDS_ONLY,
            include_doubles=True,
            require_kick=True,
            allow_kick_doubles=False,
        )
        state = build_coverage(contradictory)

        assert state.is_exhausted
        assert state.signature == contradictory.signature


class TestPickCell:
    """Selection policy for one pick."""

    def setup_method(self):
        self.eligible = build_eligible_triads(HANDS)
        self.rng = random.Random(42)

    def test_coverage_pick_consumes_choice(self):
        coverage = build_coverage(HANDS)
        cell, after = pick_cell(self.eligible, coverage, set(), True, self.rng)

        assert cell.id in coverage.remaining
        assert cell.id not in after.remaining
        assert len(after.remaining) == 7
        # Input state is untouched
        assert len(coverage.remaining) == 8

    def test_coverage_pick_respects_banned(self):
        coverage = CoverageState(remaining=frozenset({"RRR", "LLL"}), signature=HANDS.signature)
        cell, after = pick_cell(self.eligible, coverage, {"RRR"}, True, self.rng)

        assert cell.id == "LLL"
        assert after.remaining == frozenset({"RRR"})

    def test_refill_when_only_banned_cells_remain(self):
        coverage = CoverageState(remaining=frozenset({"RRR"}), signature=HANDS.signature)
        cell, after = pick_cell(self.eligible, coverage, {"RRR"}, True, self.rng)

        assert cell.id != "RRR"
        assert len(after.remaining) == 7
        assert "RRR" in after.remaining

    def test_all_banned_falls_back_without_consuming(self):
        coverage = CoverageState(remaining=frozenset(), signature=HANDS.signature)
        banned = {cell.id for cell in self.eligible}
        cell, after = pick_cell(self.eligible, coverage, banned, True, self.rng)

        assert cell in self.eligible
        assert after.remaining == frozenset(banned)

    def test_plain_random_pick_leaves_coverage_alone(self):
        coverage = build_coverage(HANDS)
        cell, after = pick_cell(self.eligible, coverage, {"RRR"}, False, self.rng)

        assert after is coverage
        assert cell.id != "RRR"

    def test_plain_random_pick_falls_back_to_full_set(self):
        banned = {cell.id for cell in self.eligible}
        cell, _ = pick_cell(self.eligible, CoverageState.empty(), banned, False, self.rng)
        assert cell in self.eligible

    def test_seeded_picks_are_reproducible(self):
        coverage = build_coverage(FULL_KIT)
        eligible = build_eligible_triads(FULL_KIT)

        first, _ = pick_cell(eligible, coverage, set(), True, random.Random(7))
        second, _ = pick_cell(eligible, coverage, set(), True, random.Random(7))

        assert first == second
