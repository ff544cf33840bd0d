"""Infrastructure layer.

Adapters implementing domain protocols: SQLAlchemy persistence, the audit
store, the authorization adapter, structured logging and session tokens.
"""
