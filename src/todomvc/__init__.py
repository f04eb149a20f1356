# src/todomvc/__init__.py

"""Single-user task list: a message-driven state core plus a console shell."""

__version__ = "0.1.0"
