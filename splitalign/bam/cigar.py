"""
holds methods related to processing cigar tuples. Cigar tuples are generally
an iterable list of tuples where the first element in each tuple is the
CIGAR value (i.e. 1 for an insertion), and the second value is the frequency
"""
from collections import namedtuple
import re

from ..constants import CIGAR
from ..error import MalformedCigarError

ALIGNED_STATES = {CIGAR.M, CIGAR.X, CIGAR.EQ}
REFERENCE_ALIGNED_STATES = ALIGNED_STATES | {CIGAR.D, CIGAR.N}
QUERY_ALIGNED_STATES = ALIGNED_STATES | {CIGAR.I, CIGAR.S}
KNOWN_STATES = REFERENCE_ALIGNED_STATES | QUERY_ALIGNED_STATES | {CIGAR.H}


class AlignmentBlock(namedtuple('AlignmentBlock', [
    'state', 'length', 'reference_start', 'reference_stop', 'read_start', 'read_stop'
])):
    """
    a single cigar element placed on the reference and on the read. All coordinates are 1-based
    and inclusive. A coordinate not consumed by the element is given as the empty range [start, start - 1]
    """

    @property
    def reference_length(self):
        return self.reference_stop - self.reference_start + 1

    @property
    def read_length(self):
        return self.read_stop - self.read_start + 1


def decompose(start, cigar):
    """
    place each cigar element of an alignment on the reference and the read

    Args:
        start (int): the 1-based reference position of the first aligned base
        cigar (:class:`list` of :class:`tuple` of :class:`int` and :class:`int`): the cigar tuples

    Returns:
        :class:`list` of :class:`AlignmentBlock`: one block per cigar element, in cigar order

    Raises:
        MalformedCigarError: the cigar is empty or has an invalid element

    Example:
        >>> decompose(100, [(CIGAR.S, 5), (CIGAR.M, 10)])
        [AlignmentBlock(state=4, length=5, reference_start=100, reference_stop=99, read_start=1, read_stop=5),
         AlignmentBlock(state=0, length=10, reference_start=100, reference_stop=109, read_start=6, read_stop=15)]
    """
    if not cigar:
        raise MalformedCigarError('cannot decompose an empty cigar')
    blocks = []
    ref_pos = start
    read_pos = 1
    for state, freq in cigar:
        if state not in KNOWN_STATES:
            raise MalformedCigarError('unsupported cigar state', state, cigar)
        if freq < 1:
            raise MalformedCigarError('cigar element lengths must be positive', (state, freq), cigar)
        ref_stop = ref_pos + freq - 1 if state in REFERENCE_ALIGNED_STATES else ref_pos - 1
        read_stop = read_pos + freq - 1 if state in QUERY_ALIGNED_STATES else read_pos - 1
        blocks.append(AlignmentBlock(state, freq, ref_pos, ref_stop, read_pos, read_stop))
        ref_pos = ref_stop + 1
        read_pos = read_stop + 1
    return blocks


def read_blocks(read):
    """
    decompose a pysam read using its alignment start
    """
    return decompose(read.reference_start + 1, read.cigartuples)


def query_length(cigar):
    """
    the number of read bases described by the cigar (hard clipped bases are not counted)
    """
    return sum([f for v, f in cigar if v in QUERY_ALIGNED_STATES])


def non_deletion_length(*cigars):
    """
    sum of all element lengths except deletions
    """
    return sum([f for cigar in cigars for v, f in cigar if v != CIGAR.D])


def non_clipped_length(*cigars):
    """
    sum of all element lengths except deletions and soft clipping
    """
    return sum([f for cigar in cigars for v, f in cigar if v not in {CIGAR.D, CIGAR.S}])


def mapped_read_start(blocks):
    """
    Returns:
        int: 1-based read position of the first block that is not soft clipped. None if every block is clipped
    """
    for block in blocks:
        if block.state != CIGAR.S:
            return block.read_start
    return None


def mapped_read_end(blocks):
    """
    Returns:
        int: 1-based read position of the end of the last block that is not soft clipped
    """
    for block in blocks[::-1]:
        if block.state != CIGAR.S:
            return block.read_stop
    return None


def convert_string_to_cigar(string):
    """
    Given a cigar string, converts it to the appropriate cigar tuple

    Raises:
        MalformedCigarError: the string is empty or does not fully parse

    Example:
        >>> convert_string_to_cigar('8M2I1D9X')
        [(CIGAR.M, 8), (CIGAR.I, 2), (CIGAR.D, 1), (CIGAR.X, 9)]
    """
    if not string or not re.fullmatch(r'(\d+[MIDNSHPX=])+', string):
        raise MalformedCigarError('invalid cigar string', string)
    cigar = re.findall(r'(\d+)([MIDNSHPX=])', string)
    return [(CIGAR[op] if op != '=' else CIGAR.EQ, int(freq)) for freq, op in cigar]


def convert_cigar_to_string(cigar):
    return ''.join(['{}{}'.format(f, CIGAR.reverse(s) if s != CIGAR.EQ else '=') for s, f in cigar])
