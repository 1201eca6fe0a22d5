import array
import itertools

import pysam

from .cigar import convert_cigar_to_string, query_length as _cigar_query_length
from ..constants import CIGAR, FILLER_BASE, PYSAM_READ_FLAGS, STRAND

NA_MAPPING_QUALITY = 255
""":class:`int`: mapping quality value to indicate mapping was not performed/calculated"""


class SamRead(pysam.AlignedSegment):
    """
    Subclass to extend the pysam.AlignedSegment class adding some utility methods and convenient representations

    Allows reference_name to be set directly so that is does not depend on a bam header
    """

    def __init__(self, reference_name=None, **kwargs):
        pysam.AlignedSegment.__init__(self)
        self._reference_name = reference_name
        self.mapping_quality = NA_MAPPING_QUALITY
        for attr, val in kwargs.items():
            setattr(self, attr, val)

    def alignment_id(self):
        return '{}:{}[{}]{}'.format(
            self.reference_name, self.reference_start, self.query_name, convert_cigar_to_string(self.cigartuples))

    @classmethod
    def copy(cls, pysamread):
        """
        Returns:
            SamRead: a detached copy of the read which keeps its reference name
        """
        cp = cls(reference_name=pysamread.reference_name)
        cp.query_name = pysamread.query_name
        cp.query_sequence = pysamread.query_sequence
        cp.query_qualities = pysamread.query_qualities
        cp.reference_start = pysamread.reference_start
        cp.reference_id = pysamread.reference_id
        cp.cigartuples = list(pysamread.cigartuples or [])
        cp.mapping_quality = pysamread.mapping_quality
        cp.template_length = pysamread.template_length
        cp.set_tags(pysamread.get_tags())
        cp.flag = pysamread.flag
        return cp

    @property
    def reference_name(self):
        return self._reference_name

    @property
    def alignment_start(self):
        """
        int: the 1-based reference position of the first aligned base
        """
        return self.reference_start + 1


def is_primary(read):
    """
    True when the alignment is neither secondary (0x100) nor supplementary (0x800)
    """
    return not read.flag & (PYSAM_READ_FLAGS.SECONDARY | PYSAM_READ_FLAGS.SUPPLEMENTARY)


def strand_letter(read):
    return STRAND.REVERSE if read.is_reverse else STRAND.FORWARD


def query_length(read):
    """
    length of the stored read sequence. Falls back to the cigar for records stored without a sequence
    """
    if read.query_sequence:
        return len(read.query_sequence)
    return _cigar_query_length(read.cigartuples)


def _pad_qualities(qualities, head, tail):
    if qualities is None:
        return None
    return array.array('B', [0] * head + list(qualities) + [0] * tail)


def replace_hard_clips(read):
    """
    create a copy of the read where hard clipping has been replaced with soft clipping. The clipped
    sequence is rematerialized with filler bases so that the read sequence matches the cigar

    Returns:
        SamRead: the soft clipped copy of the input read
    """
    result = SamRead.copy(read)
    cigar = result.cigartuples
    if not cigar or (cigar[0][0] != CIGAR.H and cigar[-1][0] != CIGAR.H):
        return result
    head = cigar[0][1] if cigar[0][0] == CIGAR.H else 0
    tail = cigar[-1][1] if cigar[-1][0] == CIGAR.H and len(cigar) > 1 else 0
    qualities = _pad_qualities(result.query_qualities, head, tail)
    result.query_sequence = FILLER_BASE * head + (result.query_sequence or '') + FILLER_BASE * tail
    result.query_qualities = qualities
    result.cigartuples = [(CIGAR.S if state == CIGAR.H else state, freq) for state, freq in cigar]
    return result


def group_by_read_name(reads):
    """
    group consecutive alignments which share the same read name

    Args:
        reads (iterable of pysam.AlignedSegment): alignments, ordered so that alignments of a read are adjacent

    Returns:
        iterable of list of pysam.AlignedSegment: the alignments of each read
    """
    for _, group in itertools.groupby(reads, key=lambda r: r.query_name):
        yield list(group)
