"""
HR Dashboard — Data Package
Demo fixtures used as fallback when the backend is unavailable.
"""
from .demo import demo_candidates, demo_stats

__all__ = ["demo_candidates", "demo_stats"]
