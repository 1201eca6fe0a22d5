class MalformedCigarError(ValueError):
    """
    raised when a cigar cannot be decomposed into alignment blocks

    for example an empty cigar, a zero length element, or an unrecognized cigar state
    """
    pass


class InvalidConfigurationError(ValueError):
    """
    raised at construction when a tunable parameter is outside of its allowed range
    """
    pass
