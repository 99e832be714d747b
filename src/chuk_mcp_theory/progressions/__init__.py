"""
Progression library - built-in progressions plus user YAML progressions.
"""

from chuk_mcp_theory.progressions.loader import ProgressionLoader

__all__ = ["ProgressionLoader"]
