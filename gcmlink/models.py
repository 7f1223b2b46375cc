# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

import base64
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gcmlink.constants import NONCE_SIZE, TAG_SIZE


class AesGcmResult(BaseModel):
    """Representa el resultado de una operación AES-GCM.

    El token de transporte es ``base64(nonce ‖ ciphertext ‖ tag)`` con el
    alfabeto estándar y relleno; no lleva byte de versión ni longitudes.

    Attributes:
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    @field_validator("nonce")
    @classmethod
    def _check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"nonce must be {NONCE_SIZE} bytes")
        return value

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: bytes) -> bytes:
        if len(value) != TAG_SIZE:
            raise ValueError(f"tag must be {TAG_SIZE} bytes")
        return value

    @classmethod
    def from_sealed(cls, nonce: bytes, sealed: bytes) -> "AesGcmResult":
        """Separa la salida de `AESGCM.encrypt` (ciphertext con tag al final)."""

        return cls(nonce=nonce, ciphertext=sealed[:-TAG_SIZE], tag=sealed[-TAG_SIZE:])

    @classmethod
    def from_token(cls, token: Union[str, bytes]) -> "AesGcmResult":
        """Interpreta un token base64 y lo separa en nonce, ciphertext y tag.

        Args:
            token (Union[str, bytes]): Token producido por `to_token`.

        Returns:
            AesGcmResult: Componentes del token.

        Raises:
            ValueError: Si el base64 es inválido o el token es demasiado corto.

        """

        raw = base64.b64decode(token, validate=True)
        if len(raw) < NONCE_SIZE:
            raise ValueError("token too short to hold a nonce")
        body = raw[NONCE_SIZE:]
        if len(body) < TAG_SIZE:
            raise ValueError("token too short to hold a tag")
        return cls(nonce=raw[:NONCE_SIZE], ciphertext=body[:-TAG_SIZE], tag=body[-TAG_SIZE:])

    @property
    def sealed(self) -> bytes:
        """Ciphertext con el tag concatenado, tal como lo espera `AESGCM.decrypt`."""

        return self.ciphertext + self.tag

    def to_token(self) -> str:
        """Codifica ``nonce ‖ ciphertext ‖ tag`` en base64 estándar con relleno."""

        return base64.b64encode(self.nonce + self.sealed).decode("ascii")


class PersonalData(BaseModel):
    """Registro de ejemplo que viaja cifrado en el fragmento de un enlace.

    Attributes:
        first_name (str): Nombre (`firstName` en JSON).
        last_name (str): Apellidos (`lastName` en JSON).
        tax_number (str): Número fiscal (`taxNumber` en JSON).
        flavour (str): Texto libre mostrado tras descifrar.

    """

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    tax_number: str = Field(alias="taxNumber")
    flavour: str = ""

    def to_json(self) -> str:
        """Serializa en JSON compacto con las claves en camelCase."""

        return self.model_dump_json(by_alias=True)
