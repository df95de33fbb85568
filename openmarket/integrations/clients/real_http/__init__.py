"""
Real HTTP integration clients.

These clients communicate with the open market API over HTTP:
- RequestExecutor sends a request and classifies the outcome
- build_multipart_body encodes registration requests
- OpenMarketClient ties them to the endpoint resolver

Important:
- Must implement the same interface as the mock clients
- Must return raw response bodies that decode into openmarket contracts

Switching:
The selection of mock vs real clients happens in openmarket/integrations/wiring.py only.
"""
