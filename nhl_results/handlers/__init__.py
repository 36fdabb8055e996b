"""
Handlers package exports.
"""
from .results_handler import ResultsHandler

__all__ = ["ResultsHandler"]
