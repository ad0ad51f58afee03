"""Chip2Chip GenePattern module wrapper.

Translates GenePattern job parameters into a parameter file for the GSEA
Chip2Chip tool, runs the tool, and repackages its results into the job
directory.
"""

__version__ = "1.0.0"
