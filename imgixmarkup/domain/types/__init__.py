"""
Domain models (Image, Breakpoint).
"""

from imgixmarkup.domain.types.breakpoint import Breakpoint, split_size
from imgixmarkup.domain.types.image import CropMode, FitMode, Image
