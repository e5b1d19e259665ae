"""Tower game domain services: catalog, state, tower building and shuffles.

This package contains the in-memory game logic that HTTP routes and socket
handlers call into, keeping transport concerns separated from the rules of
placing words and finishing towers.
"""
