"""Recommendation synthesis."""

from leanlens.recommendations.generator import generate_recommendations

__all__ = ["generate_recommendations"]
