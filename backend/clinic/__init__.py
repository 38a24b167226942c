"""
Clinic Records API - administrative record keeping for a small clinic.
"""
__version__ = "1.0.0"
