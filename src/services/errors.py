# src/services/errors.py

"""Error kinds raised by the catalog service layer."""


class CatalogError(Exception):
    """Base class for failures talking to the remote catalog."""


class LoadFailed(CatalogError):
    """The product list could not be read."""


class SubmitFailed(CatalogError):
    """A product could not be created."""
