"""Infrastructure layer - adapters implementing domain protocols.

Structure:
- logging/: structlog-backed LoggerProtocol implementation
"""
