"""
Core coordinate engine: grids, parsers, converters, formatters and the facade.
"""
