"""
Root conftest for the test suite. Selects a non-interactive matplotlib
backend before IterNumTools imports pyplot.
"""
import matplotlib

matplotlib.use("Agg")
