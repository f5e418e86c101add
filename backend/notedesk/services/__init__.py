# Services package init
"""
NoteDesk Backend — Services Layer
===================================

What:  Business rules between routes (HTTP) and repositories (queries).

Service Inventory:
    - NoteService: list, create, update and delete notes; owns the
      required-field checks and title uniqueness
"""
