"""homefs: serve one directory tree over HTTP."""
