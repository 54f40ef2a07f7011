"""
Hotel PMS - hotel property-management back office
"""
__version__ = "1.0.0"
