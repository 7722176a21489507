"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure modules own every external resource (engine, pool, log handlers)
    - Lifecycle driven from main.py lifespan (init on startup, dispose on shutdown)
"""
