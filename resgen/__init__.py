"""
resgen - icon and splash screen generator for Cordova/Ionic style projects
"""

__version__ = "0.3.0"
