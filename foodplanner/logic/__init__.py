"""Core planning logic.

Subpackages:
- parsing: free-text recipe parsing
- planning: weekly plan generation
- shopping: scaled shopping lists

The state module ties them to the recipe catalog and saved plans.
"""
__all__ = ["parsing", "planning", "shopping", "state"]
