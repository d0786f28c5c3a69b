"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several records, such as
    invite consumption together with member counting.
    """

    pass
