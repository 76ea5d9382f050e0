"""
Application Layer

Use-case orchestration on top of the domain: the room service, the event
broadcaster, and the ports implemented by infrastructure adapters.
"""
