from .constants import STRAND

LABEL_DELIM = '_'
CHR_DELIM_ESCAPE = '+'


def escape_chr(chr):
    """
    replace the label delimiter in a chromosome name

    Example:
        >>> escape_chr('chr1_random')
        'chr1+random'
    """
    return chr.replace(LABEL_DELIM, CHR_DELIM_ESCAPE)


def unescape_chr(chr):
    return chr.replace(CHR_DELIM_ESCAPE, LABEL_DELIM)


class Breakpoint:
    """
    class for storing a candidate structural variant junction supported by a single split read.
    coordinates are given as 1-indexed
    """

    def __init__(self, left_chr, left_pos, right_chr, right_pos,
                 left_strand=STRAND.FORWARD, right_strand=STRAND.FORWARD, bases='', read_id=None):
        """
        Args:
            left_chr (str): the chromosome of the left anchor
            left_pos (int): the genomic position of the left anchor
            right_chr (str): the chromosome of the right anchor
            right_pos (int): the genomic position of the right anchor
            left_strand (STRAND): strand of the alignment giving the left anchor
            right_strand (STRAND): strand of the alignment giving the right anchor
            bases (str): read sequence spanning the junction
            read_id (str): name of the supporting read
        """
        self.left_chr = left_chr
        self.left_pos = int(left_pos)
        self.right_chr = right_chr
        self.right_pos = int(right_pos)
        self.left_strand = STRAND.enforce(left_strand)
        self.right_strand = STRAND.enforce(right_strand)
        self.bases = bases
        self.read_id = read_id

    @property
    def key(self):
        return (self.left_chr, self.left_pos, self.right_chr, self.right_pos)

    def __lt__(self, other):
        return self.key < other.key

    def __eq__(self, other):
        if not isinstance(other, Breakpoint):
            return False
        return self.key == other.key and (self.left_strand, self.right_strand, self.bases, self.read_id) == (
            other.left_strand, other.right_strand, other.bases, other.read_id)

    def __hash__(self):
        return hash(self.key + (self.left_strand, self.right_strand, self.bases, self.read_id))

    def __repr__(self):
        return 'Breakpoint({}:{}{}=={}:{}{})'.format(
            self.left_chr, self.left_pos, self.left_strand, self.right_chr, self.right_pos, self.right_strand)

    def label(self):
        """
        the delimited label of the breakpoint, chromosome names are escaped so that the label can be split again

        Example:
            >>> Breakpoint('chr1', 100, 'chr2', 200, 'F', 'R', read_id='read1').label()
            'chr1_100_chr2_200_read1_F_R'
        """
        return LABEL_DELIM.join([
            escape_chr(self.left_chr),
            str(self.left_pos),
            escape_chr(self.right_chr),
            str(self.right_pos),
            str(self.read_id),
            self.left_strand,
            self.right_strand,
        ])

    @classmethod
    def from_label(cls, label, bases=''):
        """
        parse a label created by :meth:`Breakpoint.label`. The read name may itself contain the delimiter

        Raises:
            ValueError: the label does not have the expected fields
        """
        fields = label.split(LABEL_DELIM)
        if len(fields) < 7:
            raise ValueError('breakpoint label has too few fields', label)
        left_chr, left_pos, right_chr, right_pos = fields[:4]
        left_strand, right_strand = fields[-2:]
        try:
            return cls(
                unescape_chr(left_chr), int(left_pos), unescape_chr(right_chr), int(right_pos),
                left_strand=left_strand,
                right_strand=right_strand,
                bases=bases,
                read_id=LABEL_DELIM.join(fields[4:-2]),
            )
        except KeyError as err:
            raise ValueError('breakpoint label has an invalid strand', label, err)
