"""Onscreen events: what the stream graphics should display.

Queue: onscreen-events
"""
