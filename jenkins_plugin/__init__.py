"""
Jenkins trigger plugin: start a remote job, follow it to completion.
"""

__version__ = "0.1.0"
