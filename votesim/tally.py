'''Winner selection under the compared election methods.

All methods are evaluated on the same ballot: the candidates produced by
:class:`votesim.allocate.VoterAllocator` with the statistics computed by
:class:`votesim.disapproval.DisapprovalEngine`. Winner sets include all tied
candidates; nothing is broken by lot.

-   *Plurality* (the traditional election): most votes.
-   *Approval*: lowest total disapproval over the whole electorate.
-   *Antagonist election*: every voter votes against the candidate whose
    platform differs from their own the most; the candidates with the fewest
    such votes win.
-   *Washington* (consensus) candidate: not an election method as such,
    but a synthetic platform taking the majority stance on every issue.
-   *Two-party system*: the two plurality front-runners stand again and
    every voter picks the one closer to their own platform.
'''

from __future__ import annotations

import dataclasses
import logging
import types
from typing import Dict, List, Mapping, Sequence, Tuple

from votesim.candidate import Candidate
from votesim.disapproval import Scores, compute_candidate_statistics
from votesim.persist import simple_serialization
from votesim.platforms import complement, distance

logger = logging.getLogger(__name__)


@simple_serialization
@dataclasses.dataclass(frozen=True)
class ElectionResult:
    '''A read-only snapshot of one evaluated election.

    All winner tuples refer to candidate objects in ``candidates``; all
    candidates in the snapshot are frozen.
    '''
    index: int
    population_size: int
    num_issues: int
    candidates: Tuple[Candidate, ...]
    '''Candidates on the ballot by votes descending, then by platform.'''
    plurality_winners: Tuple[Candidate, ...]
    approval_winners: Tuple[Candidate, ...]
    antagonist_winners: Tuple[Candidate, ...]
    antagonist_tally: Mapping[int, int] = dataclasses.field(hash=False)
    '''Votes against each candidate on the ballot in the antagonist
    election.'''
    stance_tally: Tuple[int, ...]
    consensus: Candidate
    two_party: Tuple[Candidate, Candidate]
    '''The two-party system candidates, the winner first.'''


def sort_candidates(candidates: Sequence[Candidate]) -> List[Candidate]:
    '''Sort candidates by votes descending; equal votes by platform.'''
    return sorted(candidates, key=lambda cand: (-cand.votes, cand.id))


def plurality_winners(ranked: Sequence[Candidate]) -> List[Candidate]:
    '''Return all candidates tied for the most votes.

    :param ranked: Candidates sorted by :func:`sort_candidates`.
    '''
    if not ranked:
        return []
    top_votes = ranked[0].votes
    winners = []
    for cand in ranked:
        if cand.votes != top_votes:
            break
        winners.append(cand)
    return winners


def approval_winners(candidates: Sequence[Candidate]) -> List[Candidate]:
    '''Return all candidates tied for the lowest total disapproval.'''
    return _minimal(candidates, lambda cand: cand.sum_disapproval)


def antagonist_winners(candidates: Sequence[Candidate],
                       antagonist_tally: Sequence[int],
                       ) -> List[Candidate]:
    '''Return all candidates tied for the fewest votes against them.

    :param candidates: Candidates on the ballot.
    :param antagonist_tally: Votes against each platform, indexed by
        platform.
    '''
    return _minimal(candidates, lambda cand: antagonist_tally[cand.id])


def _minimal(candidates, key) -> List[Candidate]:
    best = []
    best_value = None
    for cand in candidates:
        value = key(cand)
        if best_value is None or value < best_value:
            best = [cand]
            best_value = value
        elif value == best_value:
            best.append(cand)
    return best


def consensus_platform(stance_tally: Sequence[int],
                       population_size: int,
                       ) -> int:
    '''Build the platform holding the majority stance on every issue.

    An exactly split issue gets stance 1.

    :param stance_tally: Number of voters with stance 1, per issue.
    :param population_size: Total number of voters.
    '''
    platform = 0
    for w, n_stance_1 in enumerate(stance_tally):
        if n_stance_1 >= population_size - n_stance_1:
            platform |= 1 << w
    return platform


def consensus_candidate(candidates: Sequence[Candidate],
                        stance_tally: Sequence[int],
                        population_size: int,
                        num_issues: int,
                        ) -> Candidate:
    '''Create the Washington candidate and rate it against the ballot.

    The candidate receives no votes since it is not on the ballot (even if
    a candidate with the same platform is).
    '''
    washington = Candidate(consensus_platform(stance_tally, population_size))
    compute_candidate_statistics(washington, candidates, num_issues)
    return washington


def two_party_election(ranked: Sequence[Candidate],
                       num_issues: int,
                       ) -> Tuple[Candidate, Candidate]:
    '''Rerun the election with only the two front-runners standing.

    Every voter votes for the front-runner strictly closer to their
    platform; voters equally distant from both abstain. The statistics of
    both parties are recomputed against the original ballot.

    If only one candidate is on the ballot, it is challenged by the
    candidate with the opposite platform.

    :param ranked: Candidates sorted by :func:`sort_candidates`.
    :param num_issues: Number of issues in the election.
    :returns: The two parties, the winner first.
    '''
    first = ranked[0].copy()
    if len(ranked) > 1:
        second = ranked[1].copy()
    else:
        second = Candidate(complement(first.id, num_issues))
    first.votes = 0
    second.votes = 0
    for cand in ranked:
        disapproval_first = distance(first.id, cand.id)
        disapproval_second = distance(second.id, cand.id)
        if disapproval_first < disapproval_second:
            first.votes += cand.votes
        elif disapproval_first > disapproval_second:
            second.votes += cand.votes
    for party in (first, second):
        compute_candidate_statistics(party, ranked, num_issues)
    return tuple(sort_candidates([first, second]))


class TallyEngine:
    '''Evaluate a scored ballot under all methods and take a snapshot.

    :param population_size: Number of voters.
    :param num_issues: Number of issues in the election.
    '''
    def __init__(self, population_size: int, num_issues: int):
        self.population_size = population_size
        self.num_issues = num_issues

    def tally(self,
              candidates: Sequence[Candidate],
              scores: Scores,
              index: int = 0,
              ) -> ElectionResult:
        '''Determine the winners and synthesize the derived candidates.

        :param candidates: Candidates on the ballot with their statistics
            computed; the snapshot holds frozen copies of them.
        :param scores: Tallies from the same scoring of the candidates.
        :param index: Sequence number of the election.
        '''
        ranked = sort_candidates(candidates)
        plurality = plurality_winners(ranked)
        approval = approval_winners(ranked)
        antagonist = antagonist_winners(ranked, scores.antagonist_tally)
        logger.debug('winners: plurality %s, approval %s, antagonist %s',
                     plurality, approval, antagonist)
        washington = consensus_candidate(
            ranked, scores.stance_tally, self.population_size, self.num_issues
        )
        two_party = two_party_election(ranked, self.num_issues)
        logger.debug('washington candidate %s, two-party result %s',
                     washington, two_party)
        against: Dict[int, int] = {
            cand.id: scores.antagonist_tally[cand.id] for cand in ranked
        }
        snapshot = {cand.id: cand.copy().freeze() for cand in ranked}
        return ElectionResult(
            index=index,
            population_size=self.population_size,
            num_issues=self.num_issues,
            candidates=tuple(snapshot[cand.id] for cand in ranked),
            plurality_winners=tuple(snapshot[cand.id] for cand in plurality),
            approval_winners=tuple(snapshot[cand.id] for cand in approval),
            antagonist_winners=tuple(
                snapshot[cand.id] for cand in antagonist
            ),
            antagonist_tally=types.MappingProxyType(against),
            stance_tally=tuple(scores.stance_tally),
            consensus=washington.freeze(),
            two_party=tuple(party.freeze() for party in two_party),
        )
