"""
Campsite scraping pipeline.
"""
