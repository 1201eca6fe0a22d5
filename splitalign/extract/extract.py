from collections import namedtuple

from .constants import DEFAULTS
from ..bam.read import is_primary, query_length, strand_letter
from ..breakpoint import Breakpoint
from ..constants import CIGAR, DECLINE
from ..interval import Interval
from ..util import check_minimum, logger


class ExtractResult(namedtuple('ExtractResult', ['breakpoint', 'reason'])):
    """
    outcome of extracting a breakpoint from a split read. Evaluates to False when no breakpoint
    was extracted, in which case reason holds the DECLINE code
    """

    def __new__(cls, breakpoint=None, reason=None):
        if breakpoint is None and reason is None:
            raise ValueError('a declined result must give a reason')
        if reason is not None:
            DECLINE.enforce(reason)
        return super(ExtractResult, cls).__new__(cls, breakpoint, reason)

    def __bool__(self):
        return self.breakpoint is not None


def _parse_region(fields, trailing=0):
    pad = len(fields) - 3 - trailing
    return '_'.join(fields[:pad + 1]), Interval(int(fields[pad + 1]), int(fields[pad + 2]))


def parse_target_regions(read_name):
    """
    parse the pair of target regions encoded in a read name of the form
    ``<chr>_<start>_<stop>__<chr>_<start>_<stop>_<x>_<y>``. Chromosome names may contain underscores

    Returns:
        tuple: ((chr, Interval), (chr, Interval)) or None if the read name does not encode target regions

    Example:
        >>> parse_target_regions('chr1_100_200__chr2_500_600_0_1')
        (('chr1', Interval(start=100, end=200)), ('chr2', Interval(start=500, end=600)))
    """
    regions = read_name.split('__')
    if len(regions) != 2:
        return None
    region1 = regions[0].split('_')
    region2 = regions[1].split('_')
    if len(region1) < 3 or len(region2) < 5:
        return None
    try:
        return _parse_region(region1), _parse_region(region2, trailing=2)
    except ValueError:
        return None


def overlaps_read(region, read):
    chr, interval = region
    if read.reference_name != chr or read.reference_end is None:
        return False
    return Interval.overlaps(interval, (read.reference_start + 1, read.reference_end))


def read_name_target_filter(primary, secondary):
    """
    target filter for evaluation runs where the simulated read name encodes the two regions the
    read was generated from. Both regions must overlap one of the two alignments
    """
    regions = parse_target_regions(primary.query_name)
    if regions is None:
        return False
    for region in regions:
        if not overlaps_read(region, primary) and not overlaps_read(region, secondary):
            return False
    return True


class BreakpointExtractor:
    """
    Derives candidate structural variant breakpoints from reads split between two alignments
    """

    def __init__(
        self,
        read_length=DEFAULTS.read_length,
        min_mapping_quality=DEFAULTS.min_mapping_quality,
        target_filter=None,
    ):
        """
        Args:
            read_length (int): number of bases kept on either side of the split point
            min_mapping_quality (int): minimum mapping quality of both alignments
            target_filter (callable): optional predicate taking (primary, secondary), returning False to skip the read
        """
        self.read_length = check_minimum(DEFAULTS, 'read_length', read_length, 1)
        self.min_mapping_quality = check_minimum(DEFAULTS, 'min_mapping_quality', min_mapping_quality, 0)
        self.target_filter = target_filter

    def extract(self, primary, secondary):
        """
        Args:
            primary (pysam.AlignedSegment): the primary alignment of the split read
            secondary (pysam.AlignedSegment): the secondary/supplementary alignment of the split read

        Returns:
            ExtractResult: the breakpoint, or the reason no breakpoint was extracted
        """
        if self.target_filter is not None and not self.target_filter(primary, secondary):
            return self._decline(primary, DECLINE.OFF_TARGET)

        state, freq = secondary.cigartuples[0]
        if state == CIGAR.H:
            split_index = freq
            left, right = primary, secondary
        else:
            split_index = query_length(secondary)
            left, right = secondary, primary

        seq = primary.query_sequence or ''
        bases = seq[max(split_index - self.read_length, 0):min(split_index + self.read_length, len(seq))]

        return ExtractResult(Breakpoint(
            left.reference_name, left.reference_start + 1 + split_index,
            right.reference_name, right.reference_start + 1,
            left_strand=strand_letter(left),
            right_strand=strand_letter(right),
            bases=bases,
            read_id=primary.query_name,
        ))

    def process_read_group(self, reads):
        """
        extract a breakpoint from all alignments of a single read. Only reads with exactly two alignments,
        one of them primary, both above the mapping quality threshold are used
        """
        if len(reads) != 2:
            return self._decline(reads[0] if reads else None, DECLINE.NOT_A_PAIR)
        read1, read2 = reads
        if read1.mapping_quality < self.min_mapping_quality or read2.mapping_quality < self.min_mapping_quality:
            return self._decline(read1, DECLINE.LOW_MAPPING_QUALITY)

        if is_primary(read1) and not is_primary(read2):
            return self.extract(read1, read2)
        elif is_primary(read2) and not is_primary(read1):
            return self.extract(read2, read1)
        elif is_primary(read1):
            return self._decline(read1, DECLINE.MULTIPLE_PRIMARY)
        return self._decline(read1, DECLINE.NO_PRIMARY)

    def _decline(self, read, reason):
        logger.debug('no breakpoint for %s: %s', None if read is None else read.query_name, reason)
        return ExtractResult(reason=reason)
