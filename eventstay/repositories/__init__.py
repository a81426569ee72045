"""
Repository collaborators: thin async query functions over an AsyncSession.

Lookups return the entity or None and never raise for a missing row; the
service layer decides what absence means.
"""
