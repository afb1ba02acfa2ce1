"""
Bulk trip import engine.

    templates   broker template registry
    parser      manifest bytes → raw rows
    mapper      raw rows → canonical ImportRows (+ derivations)
    validator   per-row validation errors
    review      copy-on-write correction store
    commit      patient resolution + batched trip insert
    session     the state machine tying them together
"""
