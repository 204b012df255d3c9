"""Core business logic layer.

Subpackages:
- conversion: quantity/unit -> grams
- matching: free-text ingredient -> reference entry
- reporting: nutrient aggregation and % daily values
- parsing: plain-text recipes and ingredient lines
- analysis: keyword inference and the local recipe analyzer
"""
__all__ = ["conversion", "matching", "reporting", "parsing", "analysis"]
