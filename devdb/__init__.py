"""
DevDB Service Root Module

Read-only lookup service resolving device names to scaling,
description and digital control metadata.

Layer Structure:
- Domain: Core business logic and entities
- Application: Use cases and DTOs
- Infrastructure: Device database and service implementations
- Presentation: Controllers and routes for the API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
