"""Standard library modules (IO, MATH, VDMUtil) for generated code."""
