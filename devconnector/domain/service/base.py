"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic spanning an aggregate and its
    repository, or several aggregates.
    """

    pass
