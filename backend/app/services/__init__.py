"""Services Layer: use cases that orchestrate core logic around external lookups.

Invariants:
    - One use case per module, one public execute() method each
    - Collaborators received through the constructor (no module-level clients)
"""
