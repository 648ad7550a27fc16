"""Domain protocols (ports) package.

Usage:
    from gateway.domain.protocols import LoggerProtocol
"""

from gateway.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
