"""Search pagination and association sync for the DMP authoring backend."""

__version__ = "0.1.0"
