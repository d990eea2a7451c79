"""
Real HTTP integration clients.

These clients communicate with the real JazzCash gateway (sandbox or
production, depending on JAZZCASH_URL).

Important:
- Must accept the same httpx transport as the mock gateway so either can be
  plugged in without touching the calling code.
- Return raw gateway replies; interpretation lives in
  src/integrations/jazzcash/response_classifier.py.
"""
