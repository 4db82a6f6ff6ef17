"""
Lavalink Infrastructure

Adapters that drive the Lavalink node through wavelink, plus the optional
Spotify link expansion layered on top of node search.
"""
