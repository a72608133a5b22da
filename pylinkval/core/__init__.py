"""Core components for pylinkval.

This package holds the error types, the format enumerations, the base class
every format validator derives from, the configuration manager and the
pipeline that runs the validator catalog over a value.
"""
