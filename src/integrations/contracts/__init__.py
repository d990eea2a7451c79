"""
Contracts (data models).

This folder defines the request/response shapes for the JazzCash integration:
- the per-call TransactionRequest and the amount / timestamp conversions
- the TransactionSuccess / TransactionFailure outcomes returned to callers
- the error taxonomy (exceptions.py)

Both the mock and the real HTTP clients work against these contracts.
"""
