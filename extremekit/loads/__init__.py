"""
The `loads` package of extremekit provides tools for estimating the
extreme loads on a device from the statistics of its response peaks.
"""

from extremekit.loads import extreme
