"""
User interface module of Knight's Quest.

Provides the command reader and line writer used by the session, for the
console and in memory.
"""
