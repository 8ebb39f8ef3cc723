"""
Performance testing package (Locust-based).

Contains the CEP lookup user class, helper utilities, and the threshold
gates that together load-test the BrasilCEP lookup API.

Traffic goes straight to the CEP API (``http://brasilcep-api:8080`` on
the compose network by default).  Every iteration requests the same CEP
in one of two formats, so the run measures how the service copes with
sustained, cache-friendly lookups rather than data breadth.

Key Concepts Demonstrated:
- Fixed think-time pacing with ``constant`` wait
- Status checks recorded in-band, never raised
- Whole-run p90 latency gate evaluated when Locust quits
- CSV-based threshold gate for automated CI pass/fail decisions
"""
