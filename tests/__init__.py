"""
Test suite for the BrasilCEP load test.

This package contains:
- unit/: Helpers, configuration, threshold gates and the Locust hooks
- integration/: The stub CEP service and the scenario driven against it
- performance/: The Locust scenario itself (not collected by pytest)
"""
