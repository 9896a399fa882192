"""Template preview engine.

Renders Jinja2 templates against JSON or YAML data, with Python-style
slice syntax (``name[1:-1]``) rewritten into index-aware filter calls.
"""

__version__ = "0.1.0"
