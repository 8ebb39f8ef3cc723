"""
Locust scenario user classes.

- :mod:`.cep_lookup` — repeated CEP lookups alternating between the
  digits-only and hyphenated formats

Concrete scenarios inherit from :class:`~.base.CepApiUser`, which
points the virtual user at the configured CEP API.
"""
