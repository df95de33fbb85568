"""
Contracts (data models).

This folder defines the request/response shapes for the open market API:
- Product and ProductPage (list and detail responses)
- SalesInformation (registration payload)
- ModificationInformation (partial update payload)

Both mock and real HTTP clients use these contracts.
"""
