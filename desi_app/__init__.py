"""
Desi App - Everyday Data-Shaping Utilities

A collection of independent, stateless routines that validate plain records
(auction rosters, PNR bookings, chat exports, report cards, movie titles and
UPI transaction logs) and derive summaries or cleaned-up strings from them.
"""

__version__ = "0.1.0"
__author__ = "Desi App Team"
