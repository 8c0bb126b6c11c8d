"""Infrastructure layer for Soil Moisture Models.

This package contains implementations of domain interfaces
that interact with external systems (scikit-learn, matplotlib, console).
"""
