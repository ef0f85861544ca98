'''Unbiased bounded sampling from a fixed-range random generator.

A raw generator that produces integers in ``[0, R)`` cannot be mapped to
a smaller range ``[0, n)`` by taking the remainder unless ``n`` divides
``R``; the low values would come up more often than the high ones.
:class:`BoundedRandom` rejects the raw values from the incomplete top bucket
instead, as described in [#qedrand]_.

.. [#qedrand] "Random number generation", Paul Hsieh.
    http://www.azillionmonkeys.com/qed/random.html
'''

import sys
import time
import random
from typing import Optional

DEFAULT_RAND_BITS = 31
'''Width of a raw generator draw; ``2 ** 31`` is the classic C ``RAND_MAX + 1``.'''

SEED_BITS = 32
BYTE_FOLD_BASE = 0xFF + 2    # a Mersenne prime
TIME_BYTES = 8


class BoundedRandom:
    '''A uniform integer sampler over half-open ranges.

    :param random_state: Seed for the underlying generator. If not given,
        the generator is seeded by Python in its usual way.
    :param rand_bits: Number of random bits in every raw draw; the raw
        generator range is ``[0, 2 ** rand_bits)``.
    '''
    def __init__(self,
                 random_state: Optional[int] = None,
                 rand_bits: int = DEFAULT_RAND_BITS,
                 ):
        self.rand_bits = rand_bits
        self.range = 1 << rand_bits
        self._generator = random.Random(random_state)

    def seed(self, random_state: int) -> None:
        '''Restart the raw generator from the given seed.'''
        self._generator.seed(random_state)

    def raw(self) -> int:
        '''Draw a raw value from ``[0, range)``.'''
        return self._generator.getrandbits(self.rand_bits)

    def uniform(self, ceiling: int) -> int:
        '''Return a random integer from ``[0, ceiling)``.

        Raw draws falling above the largest multiple of ``ceiling`` that
        fits into the raw range are rejected and redrawn.

        :param ceiling: Exclusive upper bound; must be positive and must not
            exceed the raw generator range.
        :raises ValueError: If the ceiling is out of bounds.
        '''
        if not 0 < ceiling <= self.range:
            raise ValueError(
                f'sampling ceiling must be in (0, {self.range}], got {ceiling}'
            )
        reject_multiplier = self.range // ceiling
        reject = ceiling * reject_multiplier
        rand_num = self.raw()
        while rand_num >= reject:
            rand_num = self.raw()
        return rand_num // reject_multiplier


def seed_from_clock(now: Optional[float] = None) -> int:
    '''Derive a generator seed from the wall clock time.

    Folds the bytes of the whole-second timestamp one by one instead of
    truncating the timestamp, so that all of its bits affect the seed.
    See [#confuzz]_.

    :param now: Timestamp to use instead of the current time.
    :returns: A seed in ``[0, 2 ** 32)``.

    .. [#confuzz] "Using rand()", Julienne Walker.
        http://eternallyconfuzzled.com/arts/jsw_art_rand.aspx
    '''
    if now is None:
        now = time.time()
    seed = 0
    for byte in int(now).to_bytes(TIME_BYTES, sys.byteorder, signed=True):
        seed = (seed * BYTE_FOLD_BASE + byte) % (1 << SEED_BITS)
    return seed
