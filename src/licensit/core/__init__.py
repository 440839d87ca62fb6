"""Core: catálogo, almacén de plantillas y renderizado (sin CLI ni consola)."""
