"""Presentation layer for the note editor.

Screens here are headless: they expose observable state and take UI events,
and never import a widget toolkit, so they can be driven from tests.
"""
