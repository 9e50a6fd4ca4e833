"""
dir-organizer - sort the files of a directory into category folders.

Files are classified by extension, by a caller-supplied list of formats,
or by modification date, and moved into subdirectories of an output
directory. A list-only mode previews the moves without touching disk.
"""

__version__ = "1.0.0"
