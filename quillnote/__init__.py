"""
Quillnote - note editor screen

State, persistence and navigation plumbing for a single note editing screen.
"""

__version__ = "0.1.0"
