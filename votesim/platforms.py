'''Candidate platforms as bit vectors over a set of binary issues.

A platform is a non-negative integer whose bit *w* holds the stance (0 or 1)
on issue *w*. With ``num_issues`` issues there are ``2 ** num_issues``
possible platforms and each of them doubles as an index into the candidate
pool, so all per-platform tables are plain dense lists.
'''

Platform = int


def pool_size(num_issues: int) -> int:
    '''Return the number of distinct platforms over the given issues.'''
    return 1 << num_issues


def distance(a: Platform, b: Platform) -> int:
    '''Return the number of issues two platforms disagree on.

    This is the Hamming weight of their XOR, i.e. the disapproval a voter
    holding one of the platforms has for a candidate holding the other.
    '''
    return bin(a ^ b).count('1')


def stance(platform: Platform, issue: int) -> int:
    '''Return the stance (0 or 1) of the platform on the given issue.'''
    return (platform >> issue) & 1


def complement(platform: Platform, num_issues: int) -> Platform:
    '''Return the platform opposing the given one on every issue.'''
    return ~platform & (pool_size(num_issues) - 1)


def format_platform(platform: Platform, num_issues: int) -> str:
    '''Show the stances of the platform, issue zero being the rightmost.'''
    return format(platform, f'0{num_issues}b')
