"""
Infrastructure layer for the booking notification service.

This layer contains the implementation details for external systems integration:
- Email delivery (SMTP) and Jinja2 templates
- Request validation
- Rate limiting (in-memory or Redis)
- HTTP routers and middleware

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
