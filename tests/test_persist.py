import sys
import os
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votesim.persist
from votesim.candidate import Candidate


def test_candidate_to_dict():
    cand = Candidate(6, 12)
    cand.pro = 4
    cand.antagonist = 1
    assert votesim.persist.to_dict(cand) == {
        'class': 'votesim.candidate.Candidate',
        'id': 6,
        'votes': 12,
        'pro': 4,
        'contra': 0,
        'medius': 0,
        'sum_disapproval': 0,
        'antagonist': 1,
    }


def test_nested_values():
    serialized = votesim.persist.serialize_value({
        'winners': (Candidate(1, 2), ),
        'tally': {5: 3},
    })
    assert serialized['winners'][0]['id'] == 1
    assert serialized['tally'] == {'type': 'dict', 'keys': [5], 'values': [3]}
    json.dumps(serialized)


def test_unserializable():
    with pytest.raises(ValueError):
        votesim.persist.to_dict(object())


def test_constructor_params():
    @votesim.persist.simple_serialization
    class Example:
        def __init__(self, a, b=2):
            self.a = a
            self.b = b

    assert Example(1).to_dict() == {
        'class': Example.__module__ + '.Example', 'a': 1, 'b': 2
    }
