from ..util import WeakNamespace


DEFAULTS = WeakNamespace()
"""
- read_length
- min_mapping_quality
"""
DEFAULTS.add(
    'read_length',
    100,
    defn='number of read bases to keep on either side of the split point as the supporting sequence of a breakpoint',
)
DEFAULTS.add(
    'min_mapping_quality',
    20,
    defn='minimum mapping quality of both alignments of a split read for a breakpoint to be extracted',
)
