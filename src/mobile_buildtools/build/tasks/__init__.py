"""
Invoke tasks for mobile-buildtools.
"""
