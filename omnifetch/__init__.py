#!/usr/bin/env python3
"""
omnifetch

Prints a one-screen summary of an OmniOS machine's identity and health
beside the OmniOS logo.
"""

__version__ = "1.0.0"
