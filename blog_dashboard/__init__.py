"""
Blog Dashboard

Read-only status board for a static blog factory. Every layer
communicates through the immutable records in ``contracts``; derived
values are computed on read and never written back.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Responsibility: Immutable Blog / Asset / Evidence records, enums,
     derived-value shapes, error values
   - MUST NOT: Compute health, perform I/O

2. DERIVATION ENGINE (derivation/)
   - Responsibility: Health classification, section completeness,
     severity ranking, filter/sort views, snapshots and their serializers
   - Allowed inputs: Blog records from a loaded Catalogue
   - MUST NOT: Perform I/O, mutate records, cache derived values

3. STORAGE (storage/)
   - Responsibility: Fetch, parse and validate the catalogue document
   - Outputs: Result holding a Catalogue or an explicit Error
   - MUST NOT: Write to the catalogue source

4. CAPABILITIES (capabilities/)
   - Responsibility: Read-only presence probes for external platforms
   - MUST NOT: Feed results back into records or derivation

5. API (api/)
   - Responsibility: Read-only HTTP surface over the engine

CONSTRAINTS ENFORCED:
=====================
- Immutability-first: All records are frozen dataclasses holding tuples
- Derived, never stored: Health and completeness exist only as return values
- Deterministic: Identical inputs always produce identical outputs
- Explicit errors: Load failures are values, never silent fallbacks
"""

__version__ = "1.0.0"
