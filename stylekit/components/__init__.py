"""
Style helper components.

Each component is pure: helpers take their parameters (and, where they deal
with breakpoints, a breakpoint table) and return CSS nodes.
"""
