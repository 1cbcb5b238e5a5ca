"""Utility helpers package for text, markdown, HTML and DOCX handling.

Modules here provide the inline emphasis tokenizer, the line-oriented
markdown block parser, HTML and Word-HTML emitters, DOCX building and
reading, and ID helpers.
"""
