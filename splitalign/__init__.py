"""
holds submodules related to combining chimeric alignments and clustering split-read breakpoints
"""
__version__ = '0.1.0'
