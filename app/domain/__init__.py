"""Domain layer for Soil Moisture Models.

This package contains the core modeling logic (splitting, fitted model
representations, evaluation) following Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no external dependencies on
scikit-learn, NumPy, matplotlib, or any infrastructure concerns.
"""
