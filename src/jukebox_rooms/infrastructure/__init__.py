"""
Infrastructure Layer

Adapters for the domain and application ports:
- persistence/: in-memory room store and the expiry job
- realtime/: event publishers (in-process fan-out, Pusher Channels)
"""
