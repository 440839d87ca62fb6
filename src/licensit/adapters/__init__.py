"""Adaptadores de infraestructura: parseo del recurso JSON y escritura de LICENSE."""
