'''Repeated simulated elections over a fixed configuration.

Each election goes through the same fixed sequence of steps: the pool is
reset, voters are allocated to randomly drawn platforms, all candidates on
the ballot are scored against each other, and the scored ballot is
evaluated under all election methods into an immutable
:class:`votesim.tally.ElectionResult`. Elections share nothing but the
random stream and the reused work buffers.
'''

import logging
import math
from typing import Iterator, Optional

from votesim.allocate import VoterAllocator
from votesim.disapproval import DisapprovalEngine
from votesim.platforms import pool_size
from votesim.sampling import BoundedRandom, DEFAULT_RAND_BITS, seed_from_clock
from votesim.tally import ElectionResult, TallyEngine

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    '''The simulation setup is out of the supported bounds.'''
    pass


def max_population(rand_bits: int = DEFAULT_RAND_BITS) -> int:
    '''Return the largest supported number of voters.

    Keeps the squared population within the raw generator range so that
    the vote shares and the weighted disapprovals stay within it too.
    '''
    return math.isqrt((1 << rand_bits) - 1)


def max_issues(rand_bits: int = DEFAULT_RAND_BITS) -> int:
    '''Return the largest supported number of issues.

    Derived from the population bound: if it is all ones in binary, the
    number of its bits, otherwise the number of bits of its half.
    '''
    max_pop = max_population(rand_bits)
    if (max_pop | (max_pop >> 1)) == max_pop:
        return bin(max_pop).count('1')
    else:
        return (max_pop >> 1).bit_length()


class SimulationSetup:
    '''Parameters of a simulation run.

    :param population_size: Number of voters in every election.
    :param num_issues: Number of binary issues candidates take stances on.
    :param num_elections: Number of elections to simulate.
    :param seed: Seed of the random stream; derived from the clock if not
        given.
    :param rand_bits: Width of the raw random generator in bits.
    '''
    def __init__(self,
                 population_size: int,
                 num_issues: int,
                 num_elections: int = 1,
                 seed: Optional[int] = None,
                 rand_bits: int = DEFAULT_RAND_BITS,
                 ):
        self.population_size = population_size
        self.num_issues = num_issues
        self.num_elections = num_elections
        self.seed = seed_from_clock() if seed is None else seed
        self.rand_bits = rand_bits

    def validate(self) -> None:
        '''Check the setup against the bounds of the generator.

        :raises ConfigurationError: If any parameter is out of bounds.
        '''
        top_issues = max_issues(self.rand_bits)
        if not 1 <= self.num_issues <= top_issues:
            raise ConfigurationError(
                f'number of issues must be in [1, {top_issues}],'
                f' got {self.num_issues}'
            )
        top_population = max_population(self.rand_bits)
        if not 1 <= self.population_size <= top_population:
            raise ConfigurationError(
                f'population size must be in [1, {top_population}],'
                f' got {self.population_size}'
            )
        if self.num_elections < 1:
            raise ConfigurationError(
                f'number of elections must be positive,'
                f' got {self.num_elections}'
            )

    def __repr__(self) -> str:
        return (
            f'<SimulationSetup(population={self.population_size},'
            f'issues={self.num_issues},elections={self.num_elections},'
            f'seed={self.seed})>'
        )


class Simulation:
    '''Simulate elections with a validated setup.

    The work buffers are allocated here, once for the whole run.

    :param setup: Simulation parameters; validated on construction.
    '''
    def __init__(self, setup: SimulationSetup):
        setup.validate()
        self.setup = setup
        self.pool_size = pool_size(setup.num_issues)
        self.rng = BoundedRandom(setup.seed, rand_bits=setup.rand_bits)
        self.allocator = VoterAllocator(self.rng)
        self.disapproval = DisapprovalEngine(setup.num_issues)
        self.tallier = TallyEngine(setup.population_size, setup.num_issues)

    def run(self) -> Iterator[ElectionResult]:
        '''Simulate all the elections, yielding their results in turn.'''
        logger.info('simulating %d elections: %d voters, %d issues, seed %d',
                    self.setup.num_elections, self.setup.population_size,
                    self.setup.num_issues, self.setup.seed)
        for index in range(self.setup.num_elections):
            yield self.run_election(index)

    def run_election(self, index: int = 0) -> ElectionResult:
        '''Simulate a single election with the next part of the stream.'''
        candidates = self.allocator.allocate(
            self.setup.population_size, self.pool_size
        )
        scores = self.disapproval.score(candidates)
        result = self.tallier.tally(candidates, scores, index=index)
        logger.info('election #%d: %d candidates, plurality winners %s',
                    index + 1, len(result.candidates),
                    [cand.id for cand in result.plurality_winners])
        return result
