"""Guestbook Application Package — comment store, JSON API and static pages.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
