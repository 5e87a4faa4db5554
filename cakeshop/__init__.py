"""
Cake Shop - ordering core and HTTP API

Author: TM3
Date: 2026-10-16
"""
__version__ = "1.0.0"
