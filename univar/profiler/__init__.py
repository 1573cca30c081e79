"""
Profiler package — turns a delimited text file into a typed sample.

Modules
-------
source_reader
    Line/field splitting of the raw file.
classifier
    Cell parsing, first-row type detection, per-cell extraction and
    resolution of the verdict into a single sample.
"""
