# --------------------------------------------------------------
# File: demo.py
# Description: Demostración de un enlace con datos personales cifrados.
# --------------------------------------------------------------
"""Genera un enlace de ejemplo cuyo fragmento lleva un registro JSON cifrado."""

from typing import Optional, Tuple

from loguru import logger

from gcmlink.crypto_sym import aes_gcm_encrypt
from gcmlink.log import configure_logging
from gcmlink.models import PersonalData
from gcmlink.share_link import build_share_link, encode_fragment

DEMO_RECORD = PersonalData(
    first_name="Peter",
    last_name="Linde",
    tax_number="K12345678900",
    flavour=(
        "Alle Daten in der URL wurden sicher entschlüsselt! "
        "Sie liegen jetzt in deiner Session Storage."
    ),
)


def build_demo_link(base_url: Optional[str] = None) -> Tuple[str, str]:
    """Cifra el registro de ejemplo usando su número fiscal como contraseña.

    Args:
        base_url (Optional[str]): Origen del enlace; por defecto `LINK_BASE_URL`.

    Returns:
        Tuple[str, str]: Token escapado para URL y enlace completo.

    """

    token = aes_gcm_encrypt(DEMO_RECORD.to_json(), DEMO_RECORD.tax_number)
    return encode_fragment(token), build_share_link(token, base_url)


def main() -> None:
    """Punto de entrada de `gcmlink-demo`."""

    configure_logging()
    fragment, link = build_demo_link()
    logger.info("Enlace de demostración generado")
    print(fragment)
    print(f"\n{link}")


if __name__ == "__main__":
    main()
