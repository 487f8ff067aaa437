"""palette_clash.core — Foundation layer.

Contains the colour conversions, CIE94 difference, ranking, config loading
and report formatting. This module has NO dependencies on
palette_clash.renderers or palette_clash.registry.
Only stdlib, numpy and PyYAML are allowed here.
"""
