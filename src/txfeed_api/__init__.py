"""
API package for the txfeed transaction publisher.
"""
