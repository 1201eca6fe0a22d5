"""
reading and writing of the breakpoint candidate sequences consumed by downstream re-alignment. Each
breakpoint is written as a two line fasta record: the group label followed by the supporting bases
"""
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from .breakpoint import LABEL_DELIM, Breakpoint

GROUP_LABEL_PREFIX = 'BP'
CANDIDATE_FORMAT = 'fasta-2line'


def group_label(group_id, breakpoint):
    """
    Example:
        >>> group_label(3, Breakpoint('chr1', 100, 'chr2', 200, 'F', 'R', read_id='read1'))
        'BP_3_chr1_100_chr2_200_read1_F_R'
    """
    return LABEL_DELIM.join([GROUP_LABEL_PREFIX, str(group_id), breakpoint.label()])


def parse_group_label(label):
    """
    Returns:
        tuple of int and Breakpoint: the group id and the labelled breakpoint (without bases)

    Raises:
        ValueError: the label was not created by :func:`group_label`
    """
    prefix, group_id, breakpoint_label = (label.split(LABEL_DELIM, 2) + ['', ''])[:3]
    if prefix != GROUP_LABEL_PREFIX or not group_id.isdigit():
        raise ValueError('not a breakpoint group label', label)
    return int(group_id), Breakpoint.from_label(breakpoint_label)


def write_breakpoint_candidates(groups, handle):
    """
    Args:
        groups (:class:`list` of :class:`~splitalign.cluster.BreakpointGroup`): clustered breakpoints
        handle (file): writable text handle

    Returns:
        int: the number of sequences written
    """
    records = (
        SeqRecord(Seq(breakpoint.bases), id=group_label(group.group_id, breakpoint), description='')
        for group in groups
        for breakpoint in group
    )
    return SeqIO.write(records, handle, CANDIDATE_FORMAT)


def read_breakpoint_candidates(handle):
    """
    Returns:
        :class:`list` of :class:`tuple` of :class:`int` and :class:`~splitalign.breakpoint.Breakpoint`: group
        id and breakpoint (with its supporting bases) for each record
    """
    result = []
    for record in SeqIO.parse(handle, CANDIDATE_FORMAT):
        group_id, breakpoint = parse_group_label(record.id)
        breakpoint.bases = str(record.seq)
        result.append((group_id, breakpoint))
    return result
