"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that doesn't naturally belong
    to a single entity.
    """

    pass
