"""
Dirty Little Blogger.

Small blog service: signup/login over signed session cookies and CRUD
over posts, comments and authors.
"""

__version__ = "0.1.0"
