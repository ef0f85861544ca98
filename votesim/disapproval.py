'''Disapproval statistics of candidates against an electorate.

Every voter is assumed to hold exactly the platform of the candidate they
voted for. The disapproval of a voter for a candidate is then the
number of issues on which the two platforms differ
(:func:`votesim.platforms.distance`).
'''

import dataclasses
import logging
from typing import List

from votesim.candidate import Candidate
from votesim.platforms import distance, pool_size, stance

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Scores:
    '''Electorate-wide tallies produced by :meth:`DisapprovalEngine.score`.'''
    stance_tally: List[int]
    '''Number of voters with stance 1, per issue.'''
    antagonist_tally: List[int]
    '''Number of voters whose antagonist holds the given platform, indexed by
    platform.'''


def compute_candidate_statistics(candidate: Candidate,
                                 candidates: List[Candidate],
                                 num_issues: int,
                                 ) -> None:
    '''Compute the disapproval statistics of a candidate in place.

    The candidate need not be one of the compared candidates; this is how
    synthetic candidates are rated against the electorate.

    :param candidate: The candidate to rate.
    :param candidates: The candidates on the ballot, with their votes.
    :param num_issues: Number of issues in the election.
    '''
    candidate.reset_statistics()
    half = num_issues / 2
    max_disapproval = 0
    for other in candidates:
        disapproval = distance(candidate.id, other.id)
        if disapproval > half:
            candidate.contra += other.votes
        elif disapproval < half:
            candidate.pro += other.votes
        else:
            candidate.medius += other.votes
        # the first most distant candidate wins
        if disapproval > max_disapproval:
            candidate.antagonist = other.id
            max_disapproval = disapproval
        candidate.sum_disapproval += disapproval * other.votes


class DisapprovalEngine:
    '''Rate all candidates on the ballot against each other.

    The tallies are allocated once and zeroed on every scoring, so the
    returned :class:`Scores` are only valid until the next call to
    :meth:`score`.

    :param num_issues: Number of issues in the election.
    '''
    def __init__(self, num_issues: int):
        self.num_issues = num_issues
        self._stance_tally = [0] * num_issues
        self._antagonist_tally = [0] * pool_size(num_issues)

    def score(self, candidates: List[Candidate]) -> Scores:
        '''Compute the statistics of all candidates and the tallies.

        :param candidates: The candidates on the ballot; their statistics are
            filled in place.
        '''
        stance_tally = self._stance_tally
        antagonist_tally = self._antagonist_tally
        for w in range(self.num_issues):
            stance_tally[w] = 0
        for i in range(len(antagonist_tally)):
            antagonist_tally[i] = 0
        for candidate in candidates:
            compute_candidate_statistics(
                candidate, candidates, self.num_issues
            )
            antagonist_tally[candidate.antagonist] += candidate.votes
            for w in range(self.num_issues):
                stance_tally[w] += stance(candidate.id, w) * candidate.votes
        logger.debug('stance tally: %s', stance_tally)
        return Scores(stance_tally, antagonist_tally)
