"""CEP Weather API package: postal code → city → current temperature.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
