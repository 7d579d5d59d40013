"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business logic that spans an account, its
    contacts and the remote account service.
    """

    pass
