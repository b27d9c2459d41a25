"""
Price Gateway Package

A thin HTTP gateway in front of the PrintFactory ordering service.
Lists print drivers and reshapes raw subscription quotes into a fixed
Yearly/Monthly × Connect/Production price grid in cents.
"""

__version__ = "1.0.0"
