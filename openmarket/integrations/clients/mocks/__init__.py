"""
Mock integration clients.

These clients return fake (but realistic) responses without calling the open market API.
They are used when:
- the API host is not reachable
- we want to exercise ProductService end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients return wire-format bytes shaped by openmarket/integrations/contracts/*
"""
