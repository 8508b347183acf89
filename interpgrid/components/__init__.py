"""
Components for defining interpolation grids: field parsing, mode state,
resolution of committed input and grid materialization.
"""
