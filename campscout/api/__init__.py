"""
campscout/api package marker.
"""
