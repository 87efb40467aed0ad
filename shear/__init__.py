"""
shear - Scene change detection for chunked video encoding

This package turns the scene changes found in a video into the chunk
boundaries used by a parallel encoder:
- Detects scene starts with PySceneDetect
- Splits scenes longer than the configured maximum into even sub-chunks
- Writes one boundary frame number per line for the encoder to consume

The maximum chunk length is the stricter of a seconds-based and a
frames-based limit.
"""

__version__ = "0.1.0"
