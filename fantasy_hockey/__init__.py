"""
Fantasy Hockey Dashboard

Derived-state engine for a fantasy NHL dashboard: playoff bracket
resolution, per-day fantasy roster rollups, and playoff-readiness rankings.
"""

__version__ = "0.1.0"
__author__ = "Fantasy Hockey Dashboard Team"
