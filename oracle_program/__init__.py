"""
Oracle Program

Execution stage: fetch one market quote and report a u64 (raw price or LTV).
Tally stage: median of the in-consensus reveals.
"""

__version__ = "0.1.0"
