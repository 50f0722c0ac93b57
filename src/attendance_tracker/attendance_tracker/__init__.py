"""Attendance Tracker package.

This package is organized by feature modules (users, punches, stats,
calendar_grid) with a thin Flask controller layer on top of service and
repository layers.
"""
