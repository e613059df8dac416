"""
Core utilities shared by the database and pipeline packages:
exceptions, logging, validation, CLI helpers and path constants.
"""
