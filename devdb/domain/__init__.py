"""
Domain Layer Package

Device metadata entities, the row-folding rules that build them and the
ports the outer layers implement. Nothing here knows about SQL or HTTP.
"""

from devdb.domain import entities, ports, repositories, services

__all__ = ["entities", "ports", "repositories", "services"]
