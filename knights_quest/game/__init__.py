"""
Game module of Knight's Quest.

This module holds the session state machine and the turn log it records
every action in.
"""
