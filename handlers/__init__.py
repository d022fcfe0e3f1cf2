"""
handlers/ - Interaction Layer
==============================
Each handler receives the caller's Session, applies the authorization
gate, delegates to the appropriate Service, and returns a Result or a list.
No business logic lives here.
"""
