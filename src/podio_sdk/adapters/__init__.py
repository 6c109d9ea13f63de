"""Adaptadores concretos: transporte httpx y façades por recurso."""
