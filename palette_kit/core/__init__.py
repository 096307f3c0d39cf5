"""palette_kit.core — Foundation layer.

Contains colour-space maths, the named colour palette, the quantizer, the
palette composer, shade helpers, image decoding, config and report output.
This module has NO dependencies on palette_kit.exporters or palette_kit.registry.
Only stdlib, numpy, PIL and loguru are allowed here.
"""
