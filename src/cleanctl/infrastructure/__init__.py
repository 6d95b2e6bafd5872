"""Infrastructure layer — unit storage, template rendering, project facade.

This layer depends on stdlib and third-party libs (Jinja2).
The service layer bridges between domain rules and infrastructure.
"""
