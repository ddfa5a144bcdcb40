"""
LifeManager - Source Package

Data-access core of a personal life-management dashboard:
tasks, expenses, workouts and an investment portfolio.

DESIGN PRINCIPLES:
1. Every collection is read and written as one whole blob
2. Storage backend is swappable (memory, file)
3. Aggregations are pure functions over snapshots
4. Session state is owned by the application object, never global
"""

__version__ = "1.0.0"
__author__ = "LifeManager Team"
