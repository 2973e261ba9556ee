"""
Campsite availability scraper for the ALLCAMPS accommodation search API.
"""
