"""
Sub-package Documentation
==========================

The extract sub-package derives a breakpoint descriptor from a read which aligns in two
disjoint pieces (a primary and a secondary/supplementary alignment).

Algorithm Overview
--------------------

- Keep reads with exactly two alignments, both above the mapping quality threshold, one primary
- Optionally apply a target filter (ex. regions encoded in simulated read names)
- Find the split point on the read from the secondary alignment's leading hard clip, or its length
- Anchor the left and right breakpoint positions and collect the read sequence around the split point
"""
from .extract import BreakpointExtractor, ExtractResult, parse_target_regions, read_name_target_filter
