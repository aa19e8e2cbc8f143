"""
MongoDB client and collection accessors
"""
