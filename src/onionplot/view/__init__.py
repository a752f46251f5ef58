"""
The VIEW layer draws model output with matplotlib.
"""
