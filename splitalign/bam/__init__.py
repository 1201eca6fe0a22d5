"""
cigar and alignment record utilities shared by the chimera and extract sub-packages
"""
