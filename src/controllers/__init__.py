"""
Operational controllers
"""
