"""SQLAlchemy persistence (engine, models, repositories)."""
