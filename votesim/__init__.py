"""Votesim - a simulator comparing election methods on random electorates.

Candidates stand on platforms: stances (for or against) on a number of
binary issues. Every voter holds the platform of the candidate they vote
for, which lets the simulator rate each candidate by how many issues the
whole electorate disagrees with them on.

A simulation consists of many independent random elections. In each,
voters are allocated to randomly drawn platforms (:mod:`allocate`), every
candidate is rated against the electorate (:mod:`disapproval`) and the
winners are determined under several election methods side by side
(:mod:`tally`): plurality, approval, the antagonist election, a two-party
runoff between the front-runners and a synthetic consensus candidate.
The :class:`simulation.Simulation` object drives the whole process and the
:mod:`report` module renders its results.
"""
