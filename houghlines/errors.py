# houghlines/errors.py

class HoughError(Exception):
    """Base class for everything the detector raises on purpose."""

class InvalidConfigurationError(HoughError, ValueError):
    """Parameters that would give an empty or meaningless Hough space."""

class AccumulatorIndexError(HoughError, IndexError):
    """A vote landed outside the accumulator: rho scaling and max line length disagree."""

class ReconstructionError(HoughError):
    """A reconstructed line missed the image entirely (raised only in strict clipping mode)."""
