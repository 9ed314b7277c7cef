# Sampling helpers built on the easing functions

from .sampling import sample_easing, compare_representations

__all__ = [
    'sample_easing',
    'compare_representations',
]
