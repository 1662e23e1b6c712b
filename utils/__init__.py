"""
Pure algorithms with no domain-specific dependencies.

Modules:
    graph       - Connected component extraction
"""
