"""
Terminal trivia game backed by Open Trivia DB.
"""
__version__ = "0.1.0"
