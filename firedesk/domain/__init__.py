"""Domain layer.

Pure business rules with no framework or database dependencies:
roles, resource kinds, ownership views, the access policy table and the
protocols that infrastructure adapters implement.
"""
