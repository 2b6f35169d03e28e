"""Services Layer — comment store implementations.

Invariants:
    - Every store satisfies core.repository_protocols.CommentStore
    - Stores hand out CommentRecord snapshots, never their internal state
"""
