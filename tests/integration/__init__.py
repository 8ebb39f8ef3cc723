"""
Integration tests for the stub CEP service and the lookup scenario.

Tests use the Flask test client and demonstrate:
- Format-insensitive CEP lookups
- Fault injection for partial-failure runs
- Driving the Locust scenario helpers against a real WSGI app
"""
