import sys
import os
import io
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votesim.__main__
from votesim.simulation import ConfigurationError


def test_text_output():
    output = io.StringIO()
    votesim.__main__.main(
        population_size=50, num_issues=3, num_elections=2, seed=1,
        quiet=True, output=output,
    )
    text = output.getvalue()
    assert '========== ELECTION #1 ==========' in text
    assert '========== ELECTION #2 ==========' in text
    assert 'Two-Party System Election:' in text


def test_json_output():
    output = io.StringIO()
    votesim.__main__.main(
        population_size=50, num_issues=3, num_elections=3, seed=1,
        format='json', quiet=True, output=output,
    )
    parsed = [json.loads(line) for line in output.getvalue().splitlines()]
    assert [result['index'] for result in parsed] == [0, 1, 2]


def test_reproducible_output():
    outputs = []
    for i in range(2):
        output = io.StringIO()
        votesim.__main__.main(
            population_size=80, num_issues=4, num_elections=2, seed=99,
            quiet=True, output=output,
        )
        outputs.append(output.getvalue())
    assert outputs[0] == outputs[1]


def test_invalid_configuration():
    with pytest.raises(ConfigurationError):
        votesim.__main__.main(
            population_size=10, num_issues=40, seed=1, quiet=True,
            output=io.StringIO(),
        )


def test_argparser():
    args = votesim.__main__.argparser.parse_args(['-p', '100', '-n', '4', '-e', '3', '-s', '5'])
    assert vars(args) == {
        'population_size': 100,
        'num_issues': 4,
        'num_elections': 3,
        'seed': 5,
        'format': 'text',
        'verbose': False,
        'quiet': False,
    }
