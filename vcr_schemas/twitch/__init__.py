"""Twitch events: viewer interactions and stream state changes on Twitch.

Queue: twitch-events. `eventsub` builds these events from EventSub callbacks.
"""
