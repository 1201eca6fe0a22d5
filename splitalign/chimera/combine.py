from collections import namedtuple

from .constants import DEFAULTS
from ..bam import cigar as _cigar
from ..bam.read import SamRead, is_primary, query_length, replace_hard_clips
from ..constants import CIGAR, DECLINE
from ..util import check_minimum, logger


class CombineResult(namedtuple('CombineResult', ['read', 'reason'])):
    """
    outcome of trying to combine two partial alignments. Evaluates to False when the
    alignments could not be combined, in which case reason holds the DECLINE code
    """

    def __new__(cls, read=None, reason=None):
        if read is None and reason is None:
            raise ValueError('a declined result must give a reason')
        if reason is not None:
            DECLINE.enforce(reason)
        return super(CombineResult, cls).__new__(cls, read, reason)

    def __bool__(self):
        return self.read is not None


class ChimericPair(namedtuple('ChimericPair', ['read1', 'read2'])):
    """
    two partial alignments of the same read which may be explained by a single indel
    """

    def is_candidate(self, max_gap_length=DEFAULTS.max_gap_length):
        """
        True when both alignments are on the same reference and strand, are made up of more than a
        single cigar element, and start within max_gap_length of each other
        """
        read1, read2 = self
        return all([
            read1.reference_name == read2.reference_name,
            read1.is_reverse == read2.is_reverse,
            len(read1.cigartuples or []) >= 2,
            len(read2.cigartuples or []) >= 2,
            abs(read1.reference_start - read2.reference_start) < max_gap_length,
        ])


class CigarBuilder:
    """
    collects cigar elements for a single combined alignment. The cigar is only produced once
    """

    def __init__(self):
        self._elements = []
        self._built = False

    def extend(self, cigar):
        for state, freq in cigar:
            self.append(state, freq)
        return self

    def append(self, state, freq):
        if self._built:
            raise AssertionError('cannot add to a cigar that has already been built')
        if freq < 1:
            raise AssertionError('cigar elements must have a positive length', state, freq)
        self._elements.append((state, freq))
        return self

    def build(self):
        self._built = True
        return tuple(self._elements)


def trim_last_element(cigar, trim_length):
    """
    Returns:
        list: copy of the cigar with the last element shortened by trim_length
    """
    state, freq = cigar[-1]
    return cigar[:-1] + [(state, freq - trim_length)]


def pad_first_element(cigar, pad_length):
    """
    Returns:
        list: copy of the cigar with the first element lengthened by pad_length
    """
    state, freq = cigar[0]
    return [(state, freq + pad_length)] + cigar[1:]


def read_position_key(read):
    blocks = _cigar.read_blocks(read)
    return (_cigar.mapped_read_start(blocks) or 0, _cigar.mapped_read_end(blocks) or 0)


class ChimeraCombiner:
    """
    Combines chimeric alignments caused by indels when appropriate
    """

    def __init__(
        self,
        max_gap_length=DEFAULTS.max_gap_length,
        min_indel_buffer=DEFAULTS.min_indel_buffer,
        likely_insert_fudge=DEFAULTS.likely_insert_fudge,
    ):
        """
        Args:
            max_gap_length (int): maximum distance between alignment starts of a chimeric pair
            min_indel_buffer (int): minimum aligned bases required on either side of the combined indel
            likely_insert_fudge (int): distance allowance used when pruning the middle of three alignments
        """
        self.max_gap_length = check_minimum(DEFAULTS, 'max_gap_length', max_gap_length, 1)
        self.min_indel_buffer = check_minimum(DEFAULTS, 'min_indel_buffer', min_indel_buffer, 0)
        self.likely_insert_fudge = check_minimum(DEFAULTS, 'likely_insert_fudge', likely_insert_fudge, 0)

    def combine(self, read1, read2):
        """
        combine two clip-bounded partial alignments of a read into a single alignment with an
        explicit insertion or deletion between them

        Args:
            read1 (pysam.AlignedSegment): a partial alignment
            read2 (pysam.AlignedSegment): the other partial alignment of the same read

        Returns:
            CombineResult: the combined alignment, or the reason the alignments were not combined

        Raises:
            MalformedCigarError: either alignment has an empty or invalid cigar. Both cigars are decomposed
                before any other check, so this is raised even for pairs that would otherwise be declined
        """
        left, right = (read1, read2) if read1.reference_start < read2.reference_start else (read2, read1)
        left_blocks = _cigar.read_blocks(left)
        right_blocks = _cigar.read_blocks(right)

        primaries = [r for r in (read1, read2) if is_primary(r)]
        if not primaries:
            return self._decline(read1, DECLINE.NO_PRIMARY)
        elif len(primaries) > 1:
            return self._decline(read1, DECLINE.MULTIPLE_PRIMARY)
        top_hit = primaries[0]

        if len(left_blocks) < 2 or len(right_blocks) < 2:
            return self._decline(read1, DECLINE.NOT_CANDIDATE)
        if right_blocks[0].state != CIGAR.S or left_blocks[-1].state != CIGAR.S:
            return self._decline(read1, DECLINE.NOT_CLIP_BOUNDED)

        left_cigar = list(left.cigartuples[:-1])
        right_cigar = list(right.cigartuples[1:])

        if right_cigar[0][0] == CIGAR.I:
            return self._decline(read1, DECLINE.LEADING_INSERTION)

        last_left_block = left_blocks[-2]
        first_right_block = right_blocks[1]

        left_stop = last_left_block.reference_stop
        right_start = first_right_block.reference_start
        left_read_stop = last_left_block.read_stop
        right_read_start = first_right_block.read_start

        trim_length = 0
        if left_stop >= right_start or left_read_stop >= right_read_start:
            trim_length = max(left_stop - right_start + 1, left_read_stop - right_read_start + 1)
            left_cigar = trim_last_element(left_cigar, trim_length)
            if left_cigar[-1][1] < 1:
                return self._decline(read1, DECLINE.ALTERNATE_MAPPING)

        alignment_gap = right_start - (left_stop - trim_length) - 1
        read_gap = right_read_start - (left_read_stop - trim_length) - 1

        if alignment_gap > 0 and read_gap == 0:
            indel = (CIGAR.D, alignment_gap)
        else:
            total_length = _cigar.non_deletion_length(left_cigar, right_cigar)
            insert_length = query_length(top_hit) - total_length - alignment_gap
            if insert_length != read_gap - alignment_gap:
                return self._decline(read1, DECLINE.INCONSISTENT_INSERTION)
            if insert_length < 1:
                return self._decline(read1, DECLINE.NON_POSITIVE_INSERTION)
            # reference bases skipped over by mismatches
            if alignment_gap > 0:
                right_cigar = pad_first_element(right_cigar, alignment_gap)
            indel = (CIGAR.I, insert_length)

        if self.min_indel_buffer > 0:
            if _cigar.non_clipped_length(left_cigar) < self.min_indel_buffer \
                    or _cigar.non_clipped_length(right_cigar) < self.min_indel_buffer:
                return self._decline(read1, DECLINE.INSUFFICIENT_BUFFER)

        cigar = CigarBuilder().extend(left_cigar).append(*indel).extend(right_cigar).build()

        combined = SamRead.copy(top_hit)
        combined.reference_start = left_blocks[0].reference_start - 1
        combined.cigartuples = list(cigar)
        combined.mapping_quality = (read1.mapping_quality + read2.mapping_quality) // 2
        logger.debug('combined %s into %s', read1.query_name, _cigar.convert_cigar_to_string(cigar))
        return CombineResult(combined)

    def combine_pair(self, pair):
        """
        combine a chimeric pair after checking that it is a candidate for combining
        """
        if not pair.is_candidate(self.max_gap_length):
            return self._decline(pair.read1, DECLINE.NOT_CANDIDATE)
        return self.combine(*pair)

    def prune_likely_inserts(self, reads):
        """
        given three alignments of a read sorted by read position, drop the middle alignment when it
        spans the gap between the other two (likely an insertion aligned elsewhere)
        """
        if len(reads) != 3:
            return reads
        first, middle, last = [_cigar.read_blocks(r) for r in reads]
        if _cigar.mapped_read_start(middle) <= _cigar.mapped_read_end(first) + self.likely_insert_fudge \
                and _cigar.mapped_read_end(middle) >= _cigar.mapped_read_start(last) - self.likely_insert_fudge:
            logger.debug('dropping likely insert alignment %s', reads[1].alignment_id())
            return [reads[0], reads[2]]
        return reads

    def process_read_group(self, reads):
        """
        process all alignments of a single read. Returns a list holding the combined alignment when the
        alignments could be combined, otherwise the input alignments (hard clips converted to soft clips)

        Args:
            reads (:class:`list` of :class:`pysam.AlignedSegment`): alignments which share a read name

        Returns:
            :class:`list` of :class:`SamRead`: the output alignments
        """
        reads = [replace_hard_clips(r) for r in reads]
        for read in reads:
            read.set_tags([])
        if any([not r.cigartuples for r in reads]):
            return reads

        reads = self.prune_likely_inserts(sorted(reads, key=read_position_key))

        if len(reads) == 2:
            result = self.combine_pair(ChimericPair(*reads))
            if result:
                return [result.read]
        return reads

    def _decline(self, read, reason):
        logger.debug('not combining %s: %s', read.query_name, reason)
        return CombineResult(reason=reason)
