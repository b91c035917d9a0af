"""Biomarker, heart rate and recovery calculations, health probes and user data deletion."""

__version__ = "0.1.0"
__all__ = ["biomarkers", "biometrics", "data", "health"]