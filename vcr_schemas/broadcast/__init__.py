"""Broadcast events: changes in the overall broadcast/screening state.

Queue: broadcast-events
"""
