import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votesim.allocate
import votesim.disapproval
import votesim.platforms
import votesim.sampling
from votesim.candidate import Candidate


def _scenario():
    return [Candidate(0, 3), Candidate(1, 2), Candidate(3, 5)]


def _stats(cand):
    return (cand.pro, cand.medius, cand.contra, cand.sum_disapproval, cand.antagonist)


def test_two_issue_scenario():
    candidates = _scenario()
    scores = votesim.disapproval.DisapprovalEngine(2).score(candidates)
    by_id = {cand.id: cand for cand in candidates}
    # half of two issues is exactly one: one disagreement is medius, not pro
    assert _stats(by_id[0]) == (3, 2, 5, 12, 3)
    assert _stats(by_id[1]) == (2, 8, 0, 8, 0)
    assert _stats(by_id[3]) == (5, 2, 3, 8, 0)
    assert scores.antagonist_tally == [7, 0, 0, 3]
    assert scores.stance_tally == [7, 5]


def test_outside_candidate():
    candidates = _scenario()
    outsider = Candidate(2)
    votesim.disapproval.compute_candidate_statistics(outsider, candidates, 2)
    assert _stats(outsider) == (0, 8, 2, 12, 1)
    assert outsider.votes == 0


def test_antagonist_first_maximum():
    candidates = [Candidate(0b00, 1), Candidate(0b11, 1), Candidate(0b01, 1)]
    votesim.disapproval.compute_candidate_statistics(candidates[2], candidates, 2)
    # platforms 0b00 and 0b11 are both one issue away, the first one wins
    assert candidates[2].antagonist == 0b00


def test_lone_candidate_is_own_antagonist():
    candidates = [Candidate(5, 10)]
    scores = votesim.disapproval.DisapprovalEngine(3).score(candidates)
    assert candidates[0].antagonist == 5
    assert _stats(candidates[0]) == (10, 0, 0, 0, 5)
    assert scores.antagonist_tally[5] == 10


def test_statistics_recomputed():
    candidates = _scenario()
    engine = votesim.disapproval.DisapprovalEngine(2)
    engine.score(candidates)
    scores = engine.score(candidates)
    assert _stats(candidates[0]) == (3, 2, 5, 12, 3)
    assert scores.antagonist_tally == [7, 0, 0, 3]
    assert scores.stance_tally == [7, 5]


def test_tallies_reset():
    engine = votesim.disapproval.DisapprovalEngine(2)
    engine.score(_scenario())
    scores = engine.score([Candidate(2, 4)])
    assert scores.antagonist_tally == [0, 0, 4, 0]
    assert scores.stance_tally == [0, 4]


@pytest.mark.parametrize('num_issues', [1, 2, 3, 4, 7])
def test_score_invariants(num_issues):
    rng = votesim.sampling.BoundedRandom(1711)
    allocator = votesim.allocate.VoterAllocator(rng)
    engine = votesim.disapproval.DisapprovalEngine(num_issues)
    pool_size = votesim.platforms.pool_size(num_issues)
    for i in range(20):
        candidates = allocator.allocate(300, pool_size)
        scores = engine.score(candidates)
        total = sum(cand.votes for cand in candidates)
        ids = set(cand.id for cand in candidates)
        for cand in candidates:
            assert cand.pro + cand.contra + cand.medius == total
            assert cand.sum_disapproval == sum(
                votesim.platforms.distance(cand.id, other.id) * other.votes
                for other in candidates
            )
            assert cand.antagonist in ids
            max_dist = max(
                votesim.platforms.distance(cand.id, other.id)
                for other in candidates
            )
            assert votesim.platforms.distance(cand.id, cand.antagonist) == max_dist
            if num_issues % 2:
                assert cand.medius == 0
        assert sum(scores.antagonist_tally) == total
        for w in range(num_issues):
            assert scores.stance_tally[w] == sum(
                cand.votes for cand in candidates
                if votesim.platforms.stance(cand.id, w)
            )
