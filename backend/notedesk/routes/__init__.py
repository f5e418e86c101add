# Routes package init
"""
NoteDesk Backend — API Routes Package
=======================================

Route Inventory:
    - notes.py:   GET/POST/PATCH/DELETE /notes
    - health.py:  GET /health

Routes stay thin: parse the request, call the service, return its result.
"""
