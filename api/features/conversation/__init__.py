"""Conversation feature package: questions, replies and their HTTP endpoints.

Questions and their replies are stored through SQLAlchemy ORM entities and
exposed under ``/questions`` by the router in this package.
"""
