"""
Service layer for business logic.

This layer separates player rules from HTTP request handling so the
filtering, validation and progression logic can be tested without a server.
"""
