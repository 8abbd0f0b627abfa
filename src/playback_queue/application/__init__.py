"""
Application Layer

Orchestrates the playlist for its two clients:
- services/: playback-controller use cases and remote reconciliation
- interfaces/: port interfaces for the remote playlist source
"""
