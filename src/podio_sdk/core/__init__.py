"""Core del SDK: codec de parámetros, dispatcher y extracción de resultados.

Por qué separado de `adapters`:
- El Core no conoce httpx ni la CLI; depende solo del contrato `Transport`.
"""
