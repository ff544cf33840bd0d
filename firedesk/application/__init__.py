"""Application layer.

Use-case services orchestrating domain protocols.
"""
