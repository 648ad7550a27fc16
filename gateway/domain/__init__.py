"""Domain layer - framework-free types shared by the gateway.

Structure:
- value_objects/: Immutable values attached to a request (Identity)
- protocols/: Ports implemented by infrastructure adapters (logging)

The domain layer has NO dependencies on FastAPI or any infrastructure.
"""
