"""
Mock integration clients.

These return fake (but realistic) gateway replies without calling any
external API. They are used when:
- JazzCash sandbox credentials are not yet available
- We want to test flows end-to-end without network access

Important:
- Mocks are httpx transports, so the real dispatcher code path still runs.
- Replies follow the gateway's pp_* response fields.

Switching to real:
Leave the transport unset on JazzCashHttpDispatcher.
"""
