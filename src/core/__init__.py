"""
Core primitives shared by groups and rings: error taxonomy and
integer/float helpers.

This module is independent of the ring element hierarchy.
"""
