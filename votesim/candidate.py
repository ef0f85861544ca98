'''The candidate record shared by all election methods.

A :class:`Candidate` is identified by its platform. Besides the votes it
received in the plurality election, it carries the disapproval statistics
computed against the set of candidates on the ballot by
:func:`votesim.disapproval.compute_candidate_statistics`:

-   ``pro``: votes cast by voters who disagree with the candidate on less than
    half of the issues,
-   ``contra``: votes cast by voters who disagree with the candidate on more
    than half of the issues,
-   ``medius``: votes cast by voters who disagree on exactly half the issues,
-   ``sum_disapproval``: the total number of disagreements over all voters,
-   ``antagonist``: the platform of the candidate on the ballot that differs
    from this one the most.
'''

from __future__ import annotations

from typing import Any

from votesim.persist import simple_serialization
from votesim.platforms import Platform


@simple_serialization
class Candidate:
    '''A candidate standing on a platform.

    Candidates are mutable while an election is being evaluated; once
    :meth:`freeze` is called (which happens when the election result snapshot
    is produced), any further attribute assignment raises AttributeError.

    :param id: Platform of the candidate, also its index in the candidate pool.
    :param votes: Number of votes received.
    '''
    serialize_params = [
        'id', 'votes', 'pro', 'contra', 'medius', 'sum_disapproval',
        'antagonist',
    ]

    def __init__(self, id: Platform, votes: int = 0):
        self._frozen = False
        self.id = id
        self.votes = votes
        self.reset_statistics()

    def reset_statistics(self) -> None:
        '''Clear the disapproval statistics before they are recomputed.'''
        self.pro = 0
        self.contra = 0
        self.medius = 0
        self.sum_disapproval = 0
        self.antagonist = self.id

    def copy(self) -> Candidate:
        '''Return an unfrozen copy with the same votes and statistics.'''
        other = Candidate(self.id, self.votes)
        other.pro = self.pro
        other.contra = self.contra
        other.medius = self.medius
        other.sum_disapproval = self.sum_disapproval
        other.antagonist = self.antagonist
        return other

    def freeze(self) -> Candidate:
        '''Make the candidate read-only and return it.'''
        super().__setattr__('_frozen', True)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise AttributeError(f'cannot set {name} on frozen {self!r}')
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f'<Candidate({self.id},{self.votes})>'
