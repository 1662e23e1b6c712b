"""
Global constants used throughout the project
"""

DEBUG = True

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"

# Reference scenarios run by main.py
DISK_RADIUS = 449  # Domain is [-r, r]^2, disk is every point with norm < r + 1
DIAMOND_RADIUS = 45  # L1 radius of the 3D diamond
DIAMOND_DOMAIN_RADIUS = 50  # Domain is [-r, r]^3
