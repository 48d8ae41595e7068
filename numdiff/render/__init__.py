# numdiff/render/__init__.py
# Output rendering (unified-diff and side-by-side).

from numdiff.render.printer import Printer

__all__ = ["Printer"]
