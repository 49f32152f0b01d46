import smartpy as sp

#
# Deployment constants, for tests, etc.
#

# The well-known burn address. Nobody holds the key to it.
BURN_ADDRESS = sp.address("tz1burnburnburnburnburnburnburjAYjjX")

# Share of each mint burned (and, for v2, credited to the artist),
# in basis points. Passed to the mint pass contracts at origination.
SPLIT_BASIS_POINTS = 3300
BASIS_POINTS = 10000


def split_amount(total_mutez: int) -> int:
    """The share (in mutez) burned and credited to the artist for a mint costing `total_mutez`."""
    return total_mutez * SPLIT_BASIS_POINTS // BASIS_POINTS
