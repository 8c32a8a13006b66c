"""
    Set of independent tools that users might appreciate.

    =============
    List of tools
    =============

    .. autosummary::
        :nosignatures:

        dimacs
"""

from .dimacs import write_dimacs, read_dimacs, format_dimacs
