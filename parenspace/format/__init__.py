"""Fix application and formatting."""

from parenspace.format.fixes import apply_fixes
from parenspace.format.runner import run_format

__all__ = ["apply_fixes", "run_format"]
