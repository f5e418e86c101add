# Repositories package init
"""
NoteDesk Backend — Repository Accessors
=========================================

What:  Thin query functions over the `notes` and `users` tables.
Who:   Called only by the services layer.

    - note_repository: find_all, find_by_id, find_by_title, create, save, delete
    - user_repository: find_username
"""
