"""
Sub-package Documentation
==========================

The chimera sub-package is responsible for collapsing two partial (chimeric) alignments of the same
read into a single alignment with an explicit insertion or deletion.

Algorithm Overview
--------------------

- Replace hard clipping with soft clipping and drop stale alignment tags
- Sort the alignments of a read by their position on the read
- Drop the middle of three alignments when it is likely an aligned insertion
- For exactly two alignments on the same reference and strand

    - Remove the soft clipping between them
    - Trim any overlap from the left alignment
    - Classify the remaining reference/read gap as a deletion or an insertion
    - Clone the primary alignment with the combined cigar

Anything that does not fit is passed through unchanged.
"""
from .combine import ChimeraCombiner, ChimericPair, CombineResult
