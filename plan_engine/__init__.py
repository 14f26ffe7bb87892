"""
Workout plan generation engine.

Turns a short questionnaire (goal, equipment, session length, difficulty)
into an ordered sequence of timed exercise and rest intervals.
"""

__version__ = "1.0.0"
