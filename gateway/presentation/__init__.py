"""Presentation layer - HTTP concerns.

This layer owns everything that touches the wire: middleware that attaches
correlation ids and identities, the route registry and dispatcher, request
decoding/validation, and rendering of success and error envelopes.

Structure:
- api/middleware/: correlation and authentication-context middleware
- api/routing/: route metadata, registry, dispatcher, response envelope
- api/validation/: request body and query decoding
- api/errors/: error envelope schema, builder and exception handlers
- api/payloads/: reference request payloads
- api/handlers/: built-in system routes

Business handlers depend on this layer only through RequestContext,
HandlerResponse and RequestValidator.
"""
