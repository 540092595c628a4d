"""
EchoListen - Transcript Study and Vocabulary Review Tool

Slices word-timed speech transcripts into study segments, groups them
into dialogue blocks and schedules saved vocabulary for spaced review.
"""

__version__ = "1.0.0"
__author__ = "EchoListen Contributors"
