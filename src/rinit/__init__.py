"""rinit - scaffold R analysis projects from templates."""

__version__ = "0.1.0"
