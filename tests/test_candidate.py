import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from votesim.candidate import Candidate


def test_new_candidate():
    cand = Candidate(5, 3)
    assert (cand.id, cand.votes) == (5, 3)
    assert (cand.pro, cand.contra, cand.medius, cand.sum_disapproval) == (0, 0, 0, 0)
    assert cand.antagonist == 5
    assert not cand.frozen


def test_copy():
    cand = Candidate(2, 7)
    cand.contra = 7
    cand.sum_disapproval = 14
    cand.antagonist = 1
    other = cand.freeze().copy()
    assert other is not cand
    assert other.to_dict() == cand.to_dict()
    assert not other.frozen
    other.votes = 0
    assert cand.votes == 7


def test_freeze():
    cand = Candidate(1, 1)
    assert cand.freeze() is cand
    assert cand.frozen
    with pytest.raises(AttributeError):
        cand.votes = 2
    with pytest.raises(AttributeError):
        cand.reset_statistics()
    assert cand.votes == 1


def test_repr():
    assert repr(Candidate(4, 9)) == '<Candidate(4,9)>'


def test_freeze_twice():
    cand = Candidate(3, 2).freeze()
    assert cand.freeze() is cand
    assert cand.frozen
