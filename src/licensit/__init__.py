"""licensit: genera ficheros LICENSE a partir de plantillas empaquetadas."""

__version__ = "0.1.0"
