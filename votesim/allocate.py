'''Random allocation of the electorate to candidates from the pool.

Every platform in the pool is a potential candidate. The allocator walks
a partial Fisher-Yates shuffle of the pool: each step draws a not yet
visited platform and hands it a random share (possibly none) of the voters
that remain. Early draws therefore tend to collect large shares, which
produces a few strong candidates and a tail of weak ones, rather than an
even split.
'''

import logging
from typing import List

from votesim.candidate import Candidate
from votesim.sampling import BoundedRandom

logger = logging.getLogger(__name__)


class VoterAllocator:
    '''Distribute voters among randomly drawn platforms.

    The slot array holding the shuffled pool is allocated once per pool size
    and reset to the identity permutation on every allocation.

    :param rng: The sampler to draw platforms and vote shares from.
    '''
    def __init__(self, rng: BoundedRandom):
        self.rng = rng
        self._slots: List[int] = []

    def allocate(self, voters_left: int, pool_size: int) -> List[Candidate]:
        '''Allocate the voters and return the candidates that got any votes.

        :param voters_left: Number of voters to allocate.
        :param pool_size: Number of platforms in the pool.
        :returns: Candidates in the order they were drawn. Their votes sum
            up to ``voters_left`` and their platforms are distinct.
        '''
        slots = self._reset_slots(pool_size)
        candidates = []
        i = 0
        while voters_left and i < pool_size - 1:
            grab = self.rng.uniform(pool_size - i) + i
            slots[i], slots[grab] = slots[grab], slots[i]
            votes = self.rng.uniform(voters_left + 1)
            if votes:
                voters_left -= votes
                candidates.append(Candidate(slots[i], votes))
            i += 1
        if voters_left:
            # the pool ran out before the voters did
            logger.debug('assigning %d trailing voters to platform %d',
                         voters_left, slots[pool_size - 1])
            candidates.append(Candidate(slots[pool_size - 1], voters_left))
        logger.debug('allocated voters to %d candidates in %d draws',
                     len(candidates), i)
        return candidates

    def _reset_slots(self, pool_size: int) -> List[int]:
        if len(self._slots) != pool_size:
            self._slots = list(range(pool_size))
        else:
            for i in range(pool_size):
                self._slots[i] = i
        return self._slots
