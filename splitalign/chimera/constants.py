from ..util import WeakNamespace


DEFAULTS = WeakNamespace()
"""
- max_gap_length
- min_indel_buffer
- likely_insert_fudge
"""
DEFAULTS.add(
    'max_gap_length',
    2000,
    defn='maximum distance between the alignment starts of two partial alignments for them to be considered '
    'for combining into a single indel alignment',
)
DEFAULTS.add(
    'min_indel_buffer',
    0,
    defn='minimum number of aligned (not clipped, not deleted) bases required on either side of a combined indel. '
    'A value of 0 disables the check',
)
DEFAULTS.add(
    'likely_insert_fudge',
    5,
    defn='when a read has three alignments, the middle alignment is dropped if it touches both of the other '
    'alignments on the read within this many bases',
)
