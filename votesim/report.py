'''Rendering of simulated election results.

The text layout shows one line per candidate::

    <id>: <approval>% (<lean> <medius>) [<antagonist>] <votes> <votes against>

where *approval* is the complement of the candidate's total disapproval as
a percentage of the maximum possible one, *lean* is ``P`` (or ``C``)
followed by the margin of voters leaning toward (or against) the candidate
as a fraction of the electorate, ``M0.00`` if the two are balanced,
*medius* is the fraction of voters exactly split on the candidate, and
*votes against* is the candidate's tally in the antagonist election.
The Washington candidate line adds the opposite platform in braces and its
stance bits, issue zero rightmost.
'''

import json
from typing import Callable, Iterable, TextIO, Tuple

import votesim.persist
from votesim.candidate import Candidate
from votesim.platforms import complement, format_platform
from votesim.tally import ElectionResult

SEPARATOR = '-' * 70


def approval_rate(candidate: Candidate,
                  population_size: int,
                  num_issues: int,
                  ) -> float:
    '''Return the approval of the candidate in percent.'''
    max_sum_disapproval = population_size * num_issues
    return (1 - candidate.sum_disapproval / max_sum_disapproval) * 100


def lean(candidate: Candidate, population_size: int) -> str:
    '''Show the margin between voters leaning toward and against.'''
    if candidate.pro > candidate.contra:
        margin = (candidate.pro - candidate.contra) / population_size
        return f'P{margin:.2f}'
    elif candidate.contra > candidate.pro:
        margin = (candidate.contra - candidate.pro) / population_size
        return f'C{margin:.2f}'
    else:
        return 'M0.00'


def _rating(candidate: Candidate, result: ElectionResult) -> str:
    approval = approval_rate(
        candidate, result.population_size, result.num_issues
    )
    medius = candidate.medius / result.population_size
    return (
        f'{candidate.id}: {approval:2.2f}%'
        f' ({lean(candidate, result.population_size)} {medius:.2f})'
    )


def candidate_line(candidate: Candidate,
                   result: ElectionResult,
                   prefix: str = '',
                   ) -> str:
    '''Show a candidate on the ballot with its statistics.'''
    return (
        f'{prefix}{_rating(candidate, result)} [{candidate.antagonist}]'
        f' {candidate.votes} {result.antagonist_tally[candidate.id]}'
    )


def election_lines(result: ElectionResult) -> Iterable[str]:
    '''Generate the text report of a single election.'''
    yield ''
    yield f'========== ELECTION #{result.index + 1} =========='
    for cand in result.candidates:
        yield candidate_line(cand, result)
    yield ''
    yield SEPARATOR
    sections = [
        ('Traditional Election Winners:', result.plurality_winners),
        ('Approval Winners:', result.approval_winners),
        ('Antagonist Election Winners:', result.antagonist_winners),
    ]
    for title, winners in sections:
        yield ''
        yield title
        for i, cand in enumerate(winners):
            yield candidate_line(cand, result, prefix=f'  {i + 1}) ')
    washington = result.consensus
    yield ''
    yield 'Washington Candidate:'
    yield (
        f'   > {_rating(washington, result)} [{washington.antagonist}]'
        f'{{{complement(washington.id, result.num_issues)}}}'
        f' {format_platform(washington.id, result.num_issues)}'
    )
    yield ''
    yield 'Two-Party System Election:'
    for i, party in enumerate(result.two_party):
        vote_ratio = party.votes / result.population_size
        yield (
            f'  {i + 1}) {_rating(party, result)}'
            f' {party.votes} {vote_ratio:.2f}'
        )
    yield ''
    yield SEPARATOR


def election_json(result: ElectionResult) -> str:
    '''Serialize a single election result as a line of JSON.'''
    return json.dumps(votesim.persist.to_dict(result))


def dumpers(line_dumper: Callable[[ElectionResult], Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function."""

    def dump(file: TextIO, result: ElectionResult) -> None:
        for line in line_dumper(result):
            file.write(line + '\n')

    def dumps(result: ElectionResult) -> str:
        return ''.join(line + '\n' for line in line_dumper(result))

    return dump, dumps


def _json_lines(result: ElectionResult) -> Iterable[str]:
    yield election_json(result)


dump, dumps = dumpers(election_lines)
dump_json, dumps_json = dumpers(_json_lines)

FORMATS = {
    'text': dump,
    'json': dump_json,
}
