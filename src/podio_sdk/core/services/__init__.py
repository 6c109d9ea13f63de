"""Servicios del Core (sin I/O propio salvo a través del `Transport`)."""
