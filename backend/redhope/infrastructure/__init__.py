"""Infrastructure Layer: database sessions, payment gateway, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external failures mapped to typed errors from core/errors.py
"""
