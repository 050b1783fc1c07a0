"""Generation requests: asynchronous asset generation kicked off by a viewer.

Queue: generation-requests
"""
