"""
Package initializer for the LocalSupport directory project.
"""
