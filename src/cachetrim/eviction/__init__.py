"""Eviction planning and application."""

from .planner import plan_eviction
from .rewriter import apply_plan, entry_path, victim_paths

__all__ = ["apply_plan", "entry_path", "plan_eviction", "victim_paths"]
