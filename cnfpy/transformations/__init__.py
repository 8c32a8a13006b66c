"""
    Transformations convert an expression tree into other representations.

    A transformation does not modify the expression it is given, expression
    trees are immutable and can be transformed multiple times.

    ==================
    List of submodules
    ==================
    .. autosummary::
        :nosignatures:

        get_variables
        tseitin
"""
