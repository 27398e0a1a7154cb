"""calcpanel — a four-function button calculator.

Digits, a decimal point, four operators and clear drive a small state
machine; the current value goes to a display panel. No precedence: every
operator click evaluates what is pending, left to right.

Usage:
    python -m calcpanel buttons                    # Show the button panel
    python -m calcpanel press 1 + 4 x 3 =          # Replay clicks -> 15
    python -m calcpanel press 8 - 3 = --trace      # One row per click
"""

from calcpanel.machine import Calculator

__all__ = ["Calculator"]
