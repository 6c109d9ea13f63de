"""Script de ejecución.

Permite ejecutar la CLI con `python -m podio_sdk` además del script
`podio-sdk` instalado.
"""

from __future__ import annotations

from podio_sdk.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
