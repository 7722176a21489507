"""Services Layer — transactional order workflows.

Invariants:
    - Services own transaction boundaries; repositories never commit
    - Services never swallow errors, they only add rollback-before-rethrow
"""
