from splitalign.bam.cigar import convert_string_to_cigar
from splitalign.bam.read import SamRead
from splitalign.constants import PYSAM_READ_FLAGS


class Mock:
    def __init__(self, **kwargs):
        for attr, val in kwargs.items():
            setattr(self, attr, val)


def mock_read(
    cigar, start=1, reference_name='chr1', query_sequence=None, query_name='read1',
    mapping_quality=60, is_reverse=False, primary=True, supplementary=False, tags=None
):
    """
    build a SamRead from a cigar string and a 1-based alignment start. The read sequence defaults
    to repeated A's of the length given by the cigar
    """
    cigartuples = convert_string_to_cigar(cigar) if isinstance(cigar, str) else cigar
    if query_sequence is None:
        query_sequence = 'A' * sum([f for v, f in cigartuples if v in {0, 1, 4, 7, 8}])
    flag = 0
    if is_reverse:
        flag |= PYSAM_READ_FLAGS.REVERSE
    if not primary:
        flag |= PYSAM_READ_FLAGS.SUPPLEMENTARY if supplementary else PYSAM_READ_FLAGS.SECONDARY
    read = SamRead(
        reference_name=reference_name,
        query_name=query_name,
        query_sequence=query_sequence,
        reference_start=start - 1,
        cigartuples=cigartuples,
        mapping_quality=mapping_quality,
        flag=flag,
    )
    if tags:
        read.set_tags(tags)
    return read
