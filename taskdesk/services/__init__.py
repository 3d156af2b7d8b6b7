"""Services Layer — auth and task operations over an AsyncSession.

Invariants:
    - Every task operation receives the caller's identity as an argument
    - Services raise TaskDeskError subclasses, never HTTPException
"""
