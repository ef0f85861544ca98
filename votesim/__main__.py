"""A commandline tool to simulate elections over binary issues.

Simulates the given number of elections with random candidates and
voters and reports the winners under all compared election methods.
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

import votesim.report
from votesim.simulation import (
    ConfigurationError, Simulation, SimulationSetup,
    max_issues, max_population,
)

argparser = argparse.ArgumentParser(
    prog='votesim',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-p', '--population-size',
    type=int,
    required=True,
    help=f'number of voters, at most {max_population()}',
)
argparser.add_argument(
    '-n', '--num-issues',
    type=int,
    required=True,
    help=f'number of issues, at most {max_issues()}',
)
argparser.add_argument(
    '-e', '--num-elections',
    type=int,
    default=1,
    help='number of elections to simulate',
)
argparser.add_argument(
    '-s', '--seed',
    type=int,
    help='random seed; default (None) derives one from the system time',
)
argparser.add_argument(
    '-f', '--format',
    choices=sorted(votesim.report.FORMATS.keys()),
    default='text',
    help='output format of the election results',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all simulation log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any simulation log messages',
)


def main(population_size: int,
         num_issues: int,
         num_elections: int = 1,
         seed: Optional[int] = None,
         format: str = 'text',
         verbose: bool = False,
         quiet: bool = False,
         output: TextIO = sys.stdout,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    setup = SimulationSetup(
        population_size=population_size,
        num_issues=num_issues,
        num_elections=num_elections,
        seed=seed,
    )
    dump = votesim.report.FORMATS[format]
    for result in Simulation(setup).run():
        dump(output, result)


if __name__ == '__main__':
    args = argparser.parse_args()
    try:
        main(**vars(args))
    except ConfigurationError as e:
        argparser.error(str(e))
