"""
Application Layer Package

Use cases that resolve device batches and report service health, plus the
DTOs they hand to the presentation layer.
"""

from devdb.application import dtos, models, use_cases

__all__ = ["dtos", "models", "use_cases"]
