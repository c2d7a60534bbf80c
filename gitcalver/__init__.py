"""
GitCalver - Calendar versions published as git tags and a version catalog
"""
__version__ = "1.0.0"
