"""
module responsible for small utility functions and constants used throughout the splitalign package
"""

PROGNAME = 'splitalign'


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)


class Namespace:
    """
    read-only group of named constants. Members are accessed as attributes or items

    Example:
        >>> nspace = Namespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace['otherthing']
        2
    """

    def __init__(self, **kwargs):
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_defns', {})
        for attr, value in kwargs.items():
            self.add(attr, value)

    def add(self, attr, value, defn=None, cast_type=None):
        """
        Args:
            attr (str): name of the member
            value: the value of the member
            defn (str): description of the member
            cast_type (callable): type used to read the value from a string (defaults to the type of value)

        Raises:
            AttributeError: the member already exists
        """
        if attr.startswith('_'):
            raise ValueError('cannot add a private member', attr)
        if attr in self._members:
            raise AttributeError('Cannot respecify existing attribute', attr, self._members[attr])
        cast_type = cast_type or type(value)
        self._types[attr] = cast_boolean if cast_type == bool else cast_type
        if defn:
            self._defns[attr] = defn
        self._members[attr] = value

    def _lookup(self, attr):
        return self._members[attr]

    def __getattr__(self, attr):
        if attr.startswith('_') or attr not in self._members:
            raise AttributeError('{} has no member {}'.format(self.__class__.__name__, attr))
        return self._lookup(attr)

    def __getitem__(self, attr):
        return getattr(self, attr)

    def __setattr__(self, attr, value):
        raise AttributeError('namespace members are added with add', attr)

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__name__, ', '.join(['{}={}'.format(k, repr(v)) for k, v in self.items()]))

    def keys(self):
        return list(self._members)

    def values(self):
        return [self[k] for k in self._members]

    def items(self):
        return [(k, self[k]) for k in self._members]

    def define(self, attr, *default):
        """
        the description of a member, or the default (when given) if it has none

        Raises:
            KeyError: the member has no description and no default was given
        """
        if attr in self._defns or not default:
            return self._defns[attr]
        return default[0]

    def enforce(self, value):
        """
        checks that the value is one of the members of the namespace

        Returns:
            the input value

        Raises:
            KeyError: the value is not a member
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def reverse(self, value):
        """
        for a given value, return the associated key

        Raises:
            KeyError: the value is not assigned or not unique

        Example:
            >>> Namespace(thing=1, otherthing=2).reverse(1)
            'thing'
        """
        result = [key for key, val in self.items() if val == value]
        if len(result) != 1:
            raise KeyError('could not reverse, the value is not assigned to exactly one key', value, result)
        return result[0]


FILLER_BASE = 'N'
""":class:`str`: base used to rematerialize hard clipped sequence"""

STRAND = Namespace(FORWARD='F', REVERSE='R')
""":class:`Namespace`: holds controlled vocabulary for the strand letters used in breakpoint labels

- ``FORWARD``: the read aligned to the positive/forward strand
- ``REVERSE``: the read aligned to the negative/reverse strand
"""

CIGAR = Namespace(M=0, I=1, D=2, N=3, S=4, H=5, P=6, X=8, EQ=7)  # noqa
""":class:`Namespace`: Enum-like. For readable cigar values

- ``M``: alignment match (can be a sequence match or mismatch)
- ``I``: insertion to the reference
- ``D``: deletion from the reference
- ``N``: skipped region from the reference
- ``S``: soft clipping (clipped sequences present in SEQ)
- ``H``: hard clipping (clipped sequences NOT present in SEQ)
- ``P``: padding (silent deletion from padded reference)
- ``EQ``: sequence match (=)
- ``X``: sequence mismatch

note: descriptions are taken from the `samfile documentation <https://samtools.github.io/hts-specs/SAMv1.pdf>`_
"""

PYSAM_READ_FLAGS = Namespace(
    REVERSE=16,
    SECONDARY=256,
    SUPPLEMENTARY=2048,
)
""":class:`Namespace`: Enum-like. For readable PYSAM flag constants

- ``REVERSE``: SEQ being reverse complemented
- ``SECONDARY``: secondary alignment
- ``SUPPLEMENTARY``: supplementary alignment
"""

DECLINE = Namespace(
    NO_PRIMARY='no primary alignment',
    MULTIPLE_PRIMARY='multiple primary alignments',
    NOT_CANDIDATE='not a chimeric pair candidate',
    NOT_CLIP_BOUNDED='not bounded by soft clipping',
    LEADING_INSERTION='leading insertion after clipping',
    ALTERNATE_MAPPING='alternate mappings',
    INCONSISTENT_INSERTION='inconsistent insertion length',
    NON_POSITIVE_INSERTION='non-positive insertion length',
    INSUFFICIENT_BUFFER='indel too close to the alignment end',
    NOT_A_PAIR='not exactly two alignments',
    LOW_MAPPING_QUALITY='mapping quality below threshold',
    OFF_TARGET='alignments outside the target regions',
)
""":class:`Namespace`: reason codes attached to a declined combine or extract call

- ``NO_PRIMARY``: neither alignment is primary
- ``MULTIPLE_PRIMARY``: both alignments are primary
- ``NOT_CANDIDATE``: the pair differs in reference, strand, cigar complexity or is too far apart
- ``NOT_CLIP_BOUNDED``: the left alignment does not end, or the right alignment does not start, with a soft clip
- ``LEADING_INSERTION``: the right alignment starts with an insertion once its clip is removed
- ``ALTERNATE_MAPPING``: removing the overlap would empty the last left cigar element
- ``INCONSISTENT_INSERTION``: the two ways of computing the insertion length disagree
- ``NON_POSITIVE_INSERTION``: the computed insertion length is less than 1
- ``INSUFFICIENT_BUFFER``: fewer aligned bases than the minimum indel buffer on one side
- ``NOT_A_PAIR``: the read group does not hold exactly two alignments
- ``LOW_MAPPING_QUALITY``: an alignment is below the minimum mapping quality
- ``OFF_TARGET``: the target filter rejected the pair
"""
