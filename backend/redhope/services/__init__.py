"""Services Layer: one component per resource, built per request.

Invariants:
    - Components receive their AsyncSession (and gateway) in the constructor
    - Components never hold state between requests
    - Components raise RedHopeError subclasses; routes decide the HTTP envelope
"""
