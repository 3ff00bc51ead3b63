"""Domain layer (pure logic).

- Keep arithmetic, primality and report formatting here.
- Avoid I/O: no HTTP clients, no FastAPI.
- Randomness is passed in as an argument, never taken from the global module.
"""
